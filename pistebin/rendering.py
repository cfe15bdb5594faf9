"""
HTML rendering for the paste and history pages.
"""
from typing import List

from pistebin.models import PasteSummary

NOT_FOUND_HTML = "<h1>Paste not found</h1>"

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "`": "&#x60;",
    "=": "&#x3D;",
    "/": "&#x2F;",
}


def escape_html(text: str) -> str:
    """Replace & < > " ' ` = / with entities; leave everything else alone."""
    return "".join(_HTML_ENTITIES.get(char, char) for char in text)


_BASE_STYLE = """
        body {
            font-family: 'Arial', sans-serif;
            background-color: #f4f7fb;
            color: #333;
            margin: 0;
            padding: 0;
        }
        .container {
            max-width: 900px;
            margin: 30px auto;
            background-color: #ffffff;
            padding: 40px;
            border-radius: 12px;
            box-shadow: 0 12px 20px rgba(0, 0, 0, 0.1);
        }
        h2 {
            text-align: center;
            font-size: 30px;
            color: #2c6bed;
            margin-bottom: 20px;
        }
        .btn {
            background-color: #2c6bed;
            color: white;
            padding: 12px 24px;
            border: none;
            border-radius: 5px;
            cursor: pointer;
            text-decoration: none;
            font-size: 16px;
        }
        .btn:hover {
            background-color: #1d4a99;
        }
"""


def render_paste_page(content: str, raw_url: str) -> str:
    """Render the view page for a paste. Content and link are escaped here."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Pistebin</title>
    <style>{_BASE_STYLE}
        pre {{
            white-space: pre-wrap;
            word-wrap: break-word;
            background: #f7f7f7;
            padding: 20px;
            border-radius: 10px;
            font-size: 18px;
            color: #444;
            border: 1px solid #ddd;
        }}
        .btn-container {{
            text-align: center;
            margin-top: 20px;
        }}
        .copy-btn {{
            margin-left: 15px;
        }}
        .copy-message {{
            display: none;
            margin-top: 10px;
            color: #2c6bed;
            font-size: 16px;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h2>Your Paste</h2>
        <div class="btn-container">
            <a href="{escape_html(raw_url)}" class="btn">View Raw</a>
            <button id="copyButton" class="btn copy-btn">Copy to Clipboard</button>
        </div>
        <pre id="pasteContent">{escape_html(content)}</pre>
        <span id="copyMessage" class="copy-message">Copied to Clipboard!</span>
    </div>
    <script>
        const copyButton = document.getElementById('copyButton');
        const copyMessage = document.getElementById('copyMessage');
        const pasteContent = document.getElementById('pasteContent');

        copyButton.addEventListener('click', () => {{
            navigator.clipboard.writeText(pasteContent.innerText).then(() => {{
                copyMessage.style.display = 'inline';
                setTimeout(() => copyMessage.style.display = 'none', 2000);
            }});
        }});
    </script>
</body>
</html>"""


def render_empty_history_page() -> str:
    """Render the history page for a client with no pastes."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>History - No Pastes</title>
    <style>{_BASE_STYLE}
        p {{
            text-align: center;
            font-size: 18px;
            color: #777;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h2>Your Paste History</h2>
        <p>No pastes found.</p>
    </div>
</body>
</html>"""


def render_history_page(pastes: List[PasteSummary]) -> str:
    """Render a table of the given pastes, each linking to its view page."""
    rows = "".join(
        f"""
                <tr>
                    <td>{escape_html(paste.id)}</td>
                    <td><a href="/paste/{escape_html(paste.id)}" class="btn">View Paste</a></td>
                </tr>"""
        for paste in pastes
    )

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Paste History</title>
    <style>{_BASE_STYLE}
        table {{
            width: 100%;
            border-collapse: collapse;
            margin-top: 20px;
        }}
        th, td {{
            padding: 12px;
            border: 1px solid #ddd;
            text-align: center;
            font-size: 16px;
        }}
        th {{
            background-color: #2c6bed;
            color: white;
        }}
        td {{
            background-color: #f9f9f9;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h2>Your Paste History</h2>
        <table>
            <thead>
                <tr>
                    <th>ID</th>
                    <th>Action</th>
                </tr>
            </thead>
            <tbody>{rows}
            </tbody>
        </table>
    </div>
</body>
</html>"""
