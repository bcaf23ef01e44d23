"""HTML rendering of the guestbook page."""

from html import escape

from guestbook.application.usecase.greeting import GreetingListItem
from guestbook.application.usecase.vote import vote_path

PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Guestbook</title>
  </head>
  <body>
{greetings}
    <form action="/sign" method="post">
      <div><textarea name="content" rows="3" cols="60"></textarea></div>
      <div><input type="submit" value="Sign Guestbook"></div>
    </form>
{account}
  </body>
</html>
"""


def render_greeting(item: GreetingListItem) -> str:
    """Render one greeting with its score and vote link."""
    if item.author:
        byline = f"<b>{escape(item.author)}</b> wrote:"
    else:
        byline = "An anonymous person wrote:"

    return (
        "    <div class=\"greeting\">\n"
        f"      <p>{byline}</p>\n"
        f"      <pre>{escape(item.content)}</pre>\n"
        f"      <p>Score: {item.score} "
        f"<a href=\"{escape(vote_path(item.greeting_id))}\">+1</a></p>\n"
        "    </div>"
    )


def render_guestbook(
    greetings: list[GreetingListItem],
    login_url: str | None = None,
    logout_url: str | None = None,
) -> str:
    """Render the guestbook page.

    Exactly one of login_url and logout_url is expected: login for anonymous
    callers, logout for identified ones.
    """
    if logout_url:
        account = f"    <a href=\"{escape(logout_url)}\">Logout</a>"
    elif login_url:
        account = f"    <a href=\"{escape(login_url)}\">Login</a>"
    else:
        account = ""

    return PAGE.format(
        greetings="\n".join(render_greeting(item) for item in greetings),
        account=account,
    )
