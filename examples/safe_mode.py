"""Safe-mode example: decrypt an inbound envelope and encrypt the reply.

The real cipher lives outside callbackkit; this example plugs in the mock
encryptor to show where it is called.

Run with:
    uv run python examples/safe_mode.py
"""

from __future__ import annotations

from callbackkit import Guard, GuardConfig, IncomingRequest, MessageTag, MockEncryptor, Text


def main() -> None:
    # --- Configuration -------------------------------------------------------
    plaintext = (
        "<xml><ToUserName>gh_demo</ToUserName><FromUserName>user-openid</FromUserName>"
        "<CreateTime>1700000000</CreateTime><MsgType>text</MsgType>"
        "<Content>ping</Content></xml>"
    )
    encryptor = MockEncryptor(plaintext=plaintext)
    guard = Guard(GuardConfig(token="my-token"), encryptor=encryptor)
    guard.push(lambda message: Text(content="pong"), MessageTag.TEXT)

    # --- Simulate an encrypted callback --------------------------------------
    request = IncomingRequest.create(
        "https://example.com/callback?encrypt_type=aes&msg_signature=sig"
        "&nonce=n0nce&timestamp=1700000000",
        body="<xml><ToUserName>gh_demo</ToUserName><Encrypt>opaque-ciphertext</Encrypt></xml>",
    )

    response = guard.serve(request)
    print(f"Decrypt called with: {encryptor.decrypted[0]}")
    print(f"Reply before encryption: {encryptor.encrypted[0]}")
    print(f"Sent to platform: {response.content}")


if __name__ == "__main__":
    main()
