"""Test doubles shared by the test modules."""


class FakeEmailSender:
    """Collects outgoing mail instead of talking to SMTP."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[dict] = []

    async def send(self, *, to: str, subject: str, body: str) -> None:
        if self.fail:
            raise ConnectionRefusedError("smtp unavailable")
        self.sent.append({"to": to, "subject": subject, "body": body})
