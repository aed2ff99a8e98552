import pytest
from app.core import config

SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
  <title>Yale University Test Page</title>
  <meta name="description" content="Yale University official page">
  <style>.yale-header { color: #00356b; }</style>
</head>
<body>
  <div class="container">
    <h1>Welcome to Yale University</h1>
    <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
    <p>Founded in 1701, YALE is the third-oldest institution of higher education in the United States.</p>
    <div class="links">
      <a href="https://www.yale.edu/about">About Yale</a>
      <a href="https://www.yale.edu/admissions">Yale Admissions</a>
      <a href="https://medicine.yale.edu">Yale School of Medicine</a>
    </div>
    <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
    <script>var site = "yale";</script>
  </div>
  <footer>&copy; 2024 Yale University. All rights reserved.</footer>
</body>
</html>
"""

@pytest.fixture
def sample_html_with_yale():
    return SAMPLE_HTML_WITH_YALE

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Restore fetch settings that individual tests may override"""
    original_timeout = config.settings.REQUEST_TIMEOUT
    original_redirects = config.settings.FOLLOW_REDIRECTS

    yield

    config.settings.REQUEST_TIMEOUT = original_timeout
    config.settings.FOLLOW_REDIRECTS = original_redirects
