"""Shared test helpers."""


class FakeGit:
    """GitCollaborator stand-in that records how often status was queried."""

    def __init__(self, branch: str = "", status: str = ""):
        self.branch = branch
        self.status = status
        self.status_calls = 0

    def current_branch(self) -> str:
        return self.branch

    def porcelain_status(self) -> str:
        self.status_calls += 1
        return self.status


def usage_entry(input_tokens=0, cache_read=0, cache_creation=0, output=0, uuid="msg") -> dict:
    """Build an assistant transcript entry carrying message.usage."""
    return {
        "type": "assistant",
        "uuid": uuid,
        "message": {
            "role": "assistant",
            "usage": {
                "input_tokens": input_tokens,
                "cache_creation_input_tokens": cache_creation,
                "cache_read_input_tokens": cache_read,
                "output_tokens": output,
            },
        },
    }
