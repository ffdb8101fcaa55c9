"""Sample documents and fakes shared by the test suite."""

GOOGLEBOT_USER_AGENT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
GOOGLEBOT_MOBILE_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 6.0.1; Nexus 5X Build/MMB29P) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36 "
    "(compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
)
BINGBOT_USER_AGENT = "Mozilla/5.0 (compatible; bingbot/2.0; +http://www.bing.com/bingbot.htm)"
SAFARI_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 13_5_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/13.1.1 Mobile/15E148 Safari/604.1"
)

MARKER_SCRIPT = '<script type="text/javascript">window.dynamicRendering = true;</script>'

JSON_LD_BLOCK = """<script type="application/ld+json">
      { "hello": "world" }
    </script>"""

ORIGINAL_HTML = f"""<html>
  <head>
    <title>Hello World</title>
  </head>
  <body>
    <script type="text/javascript">
      console.log('Hello world!');
    </script>
    <p>Hello world!</p>
    {JSON_LD_BLOCK}
    <script>
      var myDynamicNode = document.createElement("P");
      myDynamicNode.appendChild(document.createTextNode("Hello Dynamic World"));
      document.body.appendChild(myDynamicNode);
    </script>
  </body>
</html>
"""

PREPROCESSED_HTML = ORIGINAL_HTML.replace("<head>", f"<head>{MARKER_SCRIPT}", 1)

RENDERED_HTML = PREPROCESSED_HTML.replace(
    "  </body>", "    <p>Hello Dynamic World</p>\n  </body>", 1
)


class FakeHtmlProcessor:
    """Render processor that records calls and returns a canned document."""

    def __init__(self, result: str | None = RENDERED_HTML, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []

    async def convert(self, method, url_or_html, options):
        self.calls.append((method, url_or_html, options))
        if self.error:
            raise self.error
        return self.result
