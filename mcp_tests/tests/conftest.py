import pytest

from core.models import TreeEntry


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


class FakeContentSource:
    """In-memory ContentSource.

    listings: directory path -> list of (path, type) pairs
    files:    file path -> text (None = cannot be retrieved)
    failing:  directory paths whose listing "fails" (returns [])
    """

    def __init__(self, *, listings=None, files=None, failing=()):
        self._listings = listings or {}
        self._files = files or {}
        self._failing = set(failing)
        self.list_calls = []
        self.read_calls = []

    async def list_or_fetch(self, owner, repo, path="", *, ref=None):
        self.list_calls.append((owner, repo, path, ref))
        if path in self._failing:
            return []
        return [TreeEntry(path=p, type=t) for p, t in self._listings.get(path, [])]

    async def fetch_file_content(self, owner, repo, path, *, ref=None):
        self.read_calls.append((owner, repo, path, ref))
        return self._files.get(path)


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def sample_source():
    # src/a.ts, src/b.js, node_modules/c.js, README.md
    return FakeContentSource(
        listings={
            "": [("src", "directory"), ("node_modules", "directory"), ("README.md", "file")],
            "src": [("src/a.ts", "file"), ("src/b.js", "file")],
            "node_modules": [("node_modules/c.js", "file")],
        },
        files={
            "src/a.ts": "export const a = 1;",
            "src/b.js": "module.exports = 2;",
            "node_modules/c.js": "vendored",
            "README.md": "# Demo",
        },
    )
