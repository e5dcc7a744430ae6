from gitbrowse.domain.errors import SubprocessFailure


class FakeProcessRunner:
    """Plain stub with the ProcessRunner interface, keyed by the first argument."""

    def __init__(
        self,
        text_outputs: dict[str, str] | None = None,
        byte_outputs: dict[str, bytes] | None = None,
        stderr: str | None = None,
    ) -> None:
        self._text_outputs = text_outputs or {}
        self._byte_outputs = byte_outputs or {}
        self._stderr = stderr
        self.calls: list[tuple[list[str], str]] = []

    async def run_text(self, args, cwd: str) -> str:
        self.calls.append((list(args), cwd))
        if self._stderr is not None:
            raise SubprocessFailure(self._stderr)
        return self._text_outputs.get(" ".join(args), "")

    async def run_bytes(self, args, cwd: str) -> bytes:
        self.calls.append((list(args), cwd))
        if self._stderr is not None:
            raise SubprocessFailure(self._stderr)
        return self._byte_outputs.get(" ".join(args), b"")
