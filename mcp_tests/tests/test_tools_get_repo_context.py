import pytest

from tools import get_repo_context as repo_context_tool


@pytest.mark.asyncio
async def test_repo_context_filters_and_renders(dummy_mcp, sample_source):
    repo_context_tool.register(dummy_mcp, github_client=sample_source)
    fn = dummy_mcp.tools["get-repo-context"]

    out = await fn(
        owner="octocat",
        repo="demo",
        maxFiles=10,
        fileExtensions=["ts", "md"],
        excludePaths=["node_modules"],
    )

    assert out == (
        "Repository Context for octocat/demo:\n\n"
        "File: src/a.ts\n\n```\nexport const a = 1;\n```\n\n"
        "---\n\n"
        "File: README.md\n\n```\n# Demo\n```\n\n"
    )


@pytest.mark.asyncio
async def test_repo_context_defaults_exclude_node_modules(dummy_mcp, sample_source):
    repo_context_tool.register(dummy_mcp, github_client=sample_source)
    fn = dummy_mcp.tools["get-repo-context"]

    out = await fn(owner="octocat", repo="demo")

    assert "File: src/a.ts" in out
    assert "File: src/b.js" in out
    assert "File: README.md" in out
    assert "node_modules" not in out


@pytest.mark.asyncio
async def test_repo_context_max_files_is_prefix(dummy_mcp, sample_source):
    repo_context_tool.register(dummy_mcp, github_client=sample_source)
    fn = dummy_mcp.tools["get-repo-context"]

    out = await fn(owner="octocat", repo="demo", maxFiles=1, excludePaths=[])

    assert "File: src/a.ts" in out
    assert out.count("File: ") == 1
    assert [c[2] for c in sample_source.read_calls] == ["src/a.ts"]


@pytest.mark.asyncio
async def test_repo_context_passes_ref(dummy_mcp, sample_source):
    repo_context_tool.register(dummy_mcp, github_client=sample_source)
    fn = dummy_mcp.tools["get-repo-context"]

    await fn(owner="octocat", repo="demo", ref="dev")

    assert {c[3] for c in sample_source.list_calls} == {"dev"}
    assert {c[3] for c in sample_source.read_calls} == {"dev"}


@pytest.mark.asyncio
async def test_repo_context_invalid_input_becomes_text(dummy_mcp, sample_source):
    repo_context_tool.register(dummy_mcp, github_client=sample_source)
    fn = dummy_mcp.tools["get-repo-context"]

    out = await fn(owner="octocat", repo="demo", maxFiles=-1)

    assert out == "Error fetching repository context: maxFiles must be zero or positive"
    assert sample_source.list_calls == []


@pytest.mark.asyncio
async def test_repo_context_unexpected_error_becomes_text(dummy_mcp):
    class ExplodingSource:
        async def list_or_fetch(self, owner, repo, path="", *, ref=None):
            raise RuntimeError("kaboom")

    repo_context_tool.register(dummy_mcp, github_client=ExplodingSource())
    fn = dummy_mcp.tools["get-repo-context"]

    out = await fn(owner="octocat", repo="demo")
    assert out == "Error fetching repository context: kaboom"
