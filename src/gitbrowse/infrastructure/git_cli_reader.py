from collections.abc import Callable

from gitbrowse.domain.errors import InvalidObjectName, MalformedListing
from gitbrowse.domain.models import EntryType, TreeEntry, ValidRepository
from gitbrowse.infrastructure.process_runner import ProcessRunner

LinkFor = Callable[[EntryType, str], str]


class GitCliReader:
    def __init__(self, repository: ValidRepository, runner: ProcessRunner) -> None:
        self._repository = repository
        self._runner = runner

    async def ls_tree(self, revision: str, link_for: LinkFor) -> list[TreeEntry]:
        """List the top level of ``revision`` (a branch, tag or tree hash)."""
        output = await self._runner.run_text(
            ["ls-tree", _object_name(revision)], self._repository.path
        )
        return parse_ls_tree(output, link_for)

    async def show(self, object_hash: str) -> bytes:
        return await self._runner.run_bytes(
            ["show", _object_name(object_hash)], self._repository.path
        )


def _object_name(value: str) -> str:
    # git parses a leading "-" as an option (e.g. "--output=<file>" writes a file).
    if not value or value.startswith("-"):
        raise InvalidObjectName(f"Invalid object name: {value}")
    return value


def parse_ls_tree(output: str, link_for: LinkFor) -> list[TreeEntry]:
    entries: list[TreeEntry] = []
    for line in output.split("\n"):
        line = line.replace("\r", "")
        if not line:
            continue
        # ls-tree line: <mode> SP <type> SP <hash> TAB <name>
        info, sep, name = line.partition("\t")
        fields = info.split(" ")
        if not sep or len(fields) != 3 or not name or not all(fields):
            raise MalformedListing(f"Malformed tree line: {line!r}")
        mode, entry_type, object_hash = fields
        if entry_type == "tree":
            entries.append(
                TreeEntry.subtree(mode, object_hash, name, link_for("tree", object_hash))
            )
        elif entry_type == "blob":
            entries.append(
                TreeEntry.blob(mode, object_hash, name, link_for("blob", object_hash))
            )
        else:
            raise MalformedListing(f"Unsupported tree entry type: {entry_type}")
    return entries
