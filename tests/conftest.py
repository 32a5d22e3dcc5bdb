# tests/conftest.py

import pytest


@pytest.fixture
def sample_document():
    return """<!DOCTYPE html>
<html>
<head>
  <title>My Landing Page!</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <style>
    body { margin: 0; }
  </style>
  <style>

  </style>
</head>
<body>
  <header id="top"><h1>Hi</h1></header>
  <nav class="main-navigation"><a href="#">Home</a></nav>
  <section id="hero" class="hero-component"><p>Hero</p></section>
  <section class="features grid"><p>Features</p></section>
  <div class="card-component shadow"><p>Card</p></div>
  <div class="plain"><p>Not a component</p></div>
  <footer class="site-footer">Bye</footer>
  <style>.late { color: blue; }</style>
  <script>
    console.log("first");
  </script>
  <script>console.log("second");</script>
</body>
</html>"""


class FakeClock:
    """Manually advanced replacement for time.monotonic"""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


async def iterate(chunks):
    for chunk in chunks:
        yield chunk


@pytest.fixture
def chunk_stream():
    return iterate
