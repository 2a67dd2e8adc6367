from itertools import product

from data.airlines import AirlinePolicy

FLAG_NAMES = ("drop_marker", "duplicate_single", "three_fields", "no_spaces")


def every_flag_combination():
    """All 16 policies reachable by combining the four layout flags."""
    policies = []
    for values in product([False, True], repeat=len(FLAG_NAMES)):
        flags = dict(zip(FLAG_NAMES, values))
        label = "+".join(name for name, on in flags.items() if on) or "default"
        policies.append(AirlinePolicy(label, **flags))
    return policies


class FakeResponse:
    """Stand-in for `requests.Response` with just the attributes the fetcher reads."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


SAMPLE_PAGE = """
<html>
  <head>
    <style>body { color: red; }</style>
    <script>var example = "this is a script example that should vanish";</script>
  </head>
  <body>
    <h1>Passenger names</h1>
    <p>Enter your name exactly as shown in your passport.</p>
    <p>For example, AHMAD FALIQ BIN HAMEDI should enter BIN HAMEDI as the last name.</p>
    <p>Titles such as Mr &amp; Mrs are not part of the name.</p>
  </body>
</html>
"""
