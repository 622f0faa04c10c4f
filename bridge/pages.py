"""
HTML rendering for the landing page and the token login form.
"""
from html import escape
from typing import Optional

_BASE_STYLE = """
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
      background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%);
      min-height: 100vh;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 20px;
      color: #fff;
    }
    .container {
      background: rgba(255,255,255,0.1);
      backdrop-filter: blur(10px);
      border-radius: 20px;
      padding: 40px;
      max-width: 500px;
      width: 100%;
      border: 1px solid rgba(255,255,255,0.2);
    }
    .school { text-align: center; color: #ffd700; margin-bottom: 20px; }
"""

_HOME_STYLE = """
    .container { text-align: center; }
    h1 { margin-bottom: 10px; font-size: 28px; }
    p { color: #ccc; line-height: 1.6; margin-bottom: 20px; }
    .info-box {
      background: rgba(255,255,255,0.1);
      border-radius: 10px;
      padding: 20px;
      text-align: left;
      margin-top: 20px;
    }
    .info-box h3 { margin-bottom: 10px; color: #ffd700; }
    .info-box ol { padding-left: 20px; }
    .info-box li { margin-bottom: 8px; color: #ddd; }
"""

_AUTH_STYLE = """
    h1 { text-align: center; margin-bottom: 10px; font-size: 24px; }
    label { display: block; margin-bottom: 8px; font-weight: 500; }
    input[type="password"] {
      width: 100%;
      padding: 15px;
      border: 2px solid rgba(255,255,255,0.3);
      border-radius: 10px;
      background: rgba(255,255,255,0.1);
      color: #fff;
      font-size: 16px;
      margin-bottom: 20px;
    }
    input[type="password"]:focus { outline: none; border-color: #ffd700; }
    button {
      width: 100%;
      padding: 15px;
      background: #ffd700;
      color: #1a1a2e;
      border: none;
      border-radius: 10px;
      font-size: 18px;
      font-weight: 600;
      cursor: pointer;
    }
    .help {
      background: rgba(255,255,255,0.1);
      border-radius: 10px;
      padding: 20px;
      margin-top: 25px;
    }
    .help h3 { margin-bottom: 12px; color: #ffd700; font-size: 16px; }
    .help ol { padding-left: 20px; }
    .help li { margin-bottom: 8px; color: #ccc; font-size: 14px; line-height: 1.5; }
    .help a { color: #ffd700; }
    .security {
      margin-top: 20px;
      padding: 15px;
      background: rgba(0,255,0,0.1);
      border-radius: 10px;
      font-size: 13px;
      color: #8f8;
      text-align: center;
    }
"""


def _document(title: str, style: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>{_BASE_STYLE}{style}  </style>
</head>
<body>
  <div class="container">
{body}
  </div>
</body>
</html>"""


def render_home_page(institution_name: str) -> str:
    """Static page explaining how to sign in from the calling client"""
    school = escape(institution_name)
    body = f"""    <h1>Canvas GPT</h1>
    <p class="school">{school}</p>
    <p>This service connects ChatGPT to your Canvas account.</p>
    <p>To use it, open the Canvas GPT in ChatGPT and click "Sign in".</p>

    <div class="info-box">
      <h3>How it works:</h3>
      <ol>
        <li>Open Canvas GPT in ChatGPT</li>
        <li>Click "Sign in" when prompted</li>
        <li>Paste your Canvas access token</li>
        <li>Start managing your courses!</li>
      </ol>
    </div>

    <div class="info-box">
      <h3>Privacy:</h3>
      <p>Your token is sent directly to ChatGPT. This page does not store any data.</p>
    </div>"""
    return _document(f"Canvas GPT - {school}", _HOME_STYLE, body)


def render_authorize_page(
    institution_name: str,
    upstream_host: str,
    redirect_uri: str,
    state: Optional[str] = None,
) -> str:
    """
    Login form that posts the pasted token to /callback.

    redirect_uri and state are round-tripped through hidden fields verbatim
    (HTML-escaped only); the bridge does not validate either.
    """
    school = escape(institution_name)
    host = escape(upstream_host)
    body = f"""    <h1>Connect to Canvas</h1>
    <p class="school">{school}</p>

    <form action="/callback" method="POST">
      <input type="hidden" name="redirect_uri" value="{escape(redirect_uri, quote=True)}">
      <input type="hidden" name="state" value="{escape(state or '', quote=True)}">

      <label for="token">Canvas Access Token</label>
      <input
        type="password"
        id="token"
        name="token"
        placeholder="Paste your token here"
        required
        autocomplete="off"
      >

      <button type="submit">Connect to Canvas</button>
    </form>

    <div class="help">
      <h3>How to get your token:</h3>
      <ol>
        <li>Go to <a href="https://{host}" target="_blank" rel="noopener">{host}</a></li>
        <li>Click <strong>Account</strong> (left sidebar) &rarr; <strong>Settings</strong></li>
        <li>Scroll to <strong>Approved Integrations</strong></li>
        <li>Click <strong>+ New Access Token</strong></li>
        <li>Enter purpose: <strong>ChatGPT</strong></li>
        <li>Click <strong>Generate Token</strong></li>
        <li>Copy the token and paste it above</li>
      </ol>
    </div>

    <div class="security">
      Your token is sent directly to ChatGPT. This page does not store any data.
    </div>"""
    return _document(f"Connect to Canvas - {school}", _AUTH_STYLE, body)
