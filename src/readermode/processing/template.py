"""Presentational template for extracted content."""

from __future__ import annotations

import html as html_lib

STYLESHEET = """
body {
  margin: 0;
  padding: 20px;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;
  font-size: 18px;
  line-height: 1.6;
  max-width: 800px;
  margin: 0 auto;
  word-wrap: break-word;
}
img {
  max-width: 100%;
  height: auto;
  display: block;
  margin: 16px auto;
  border-radius: 8px;
}
h1, h2, h3, h4, h5, h6 {
  margin-top: 1.2em;
  margin-bottom: 0.6em;
  font-weight: bold;
  line-height: 1.3;
}
h1 { font-size: 2em; }
h2 { font-size: 1.5em; }
h3 { font-size: 1.25em; }
p {
  margin-bottom: 16px;
  text-align: justify;
}
a {
  color: #007AFF;
  text-decoration: underline;
}
blockquote {
  border-left: 4px solid #007AFF;
  padding: 12px 16px;
  margin: 16px 0;
  background-color: #f8f9fa;
  border-radius: 4px;
  font-style: italic;
}
pre, code {
  background-color: #f8f9fa;
  border-radius: 4px;
  font-family: 'Courier New', monospace;
}
pre {
  padding: 12px;
  overflow-x: auto;
  margin: 16px 0;
}
code {
  padding: 2px 6px;
}
ul, ol {
  padding-left: 24px;
  margin-bottom: 16px;
}
li {
  margin-bottom: 8px;
}
table {
  width: 100%;
  border-collapse: collapse;
  margin: 16px 0;
}
th, td {
  padding: 8px;
  border: 1px solid #ddd;
  text-align: left;
}
th {
  background-color: #f8f9fa;
  font-weight: bold;
}
.article-title {
  font-size: 2.2em;
  margin-bottom: 24px;
  line-height: 1.2;
  color: #1a1a1a;
}
.article-content {
  max-width: 100%;
}
figure {
  margin: 16px 0;
  text-align: center;
}
figcaption {
  font-size: 0.9em;
  color: #666;
  margin-top: 8px;
  font-style: italic;
}
""".strip()


def wrap_with_css(inner_html: str, title: str | None = None) -> str:
    """Embed extracted markup in a standalone, styled HTML document (no doctype)."""
    title_html = f'<h1 class="article-title">{html_lib.escape(title)}</h1>' if title else ""
    return f"""
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
{STYLESHEET}
    </style>
  </head>
  <body>
    {title_html}
    <div class="article-content">
      {inner_html}
    </div>
  </body>
</html>
""".strip()
