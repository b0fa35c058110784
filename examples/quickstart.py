"""callbackkit quickstart: answer a signed text callback.

Run with:
    uv run python examples/quickstart.py
"""

from __future__ import annotations

import logging
import time

from callbackkit import (
    Guard,
    GuardConfig,
    IncomingRequest,
    Message,
    MessageTag,
    NewsItem,
    compute_signature,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # --- Setup -----------------------------------------------------------
    guard = Guard(GuardConfig(token="my-token", app_id="wx-demo"))

    @guard.on(MessageTag.TEXT)
    def echo(message: Message) -> str:
        return f"You said: {message['Content']}"

    @guard.on(MessageTag.EVENT)
    def welcome(message: Message) -> list[NewsItem]:
        if message.get("Event") != "subscribe":
            return []
        return [NewsItem(title="Welcome!", url="https://example.com/welcome")]

    # --- Simulate a signed callback from the platform ----------------------
    timestamp = int(time.time())
    nonce = "demo-nonce"
    signature = compute_signature("my-token", timestamp, nonce)

    request = IncomingRequest.create(
        f"https://example.com/callback?timestamp={timestamp}&nonce={nonce}&signature={signature}",
        body=(
            "<xml><ToUserName><![CDATA[gh_demo]]></ToUserName>"
            "<FromUserName><![CDATA[user-openid]]></FromUserName>"
            f"<CreateTime>{timestamp}</CreateTime>"
            "<MsgType><![CDATA[text]]></MsgType>"
            "<Content><![CDATA[hello]]></Content></xml>"
        ),
    )

    response = guard.serve(request)
    print(f"{response.status_code}: {response.content}")


if __name__ == "__main__":
    main()
