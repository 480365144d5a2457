import pytest


class FakeGenerator:
    """Stand-in for the LLM client: records calls and replays a fixed reply."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system: str, user: str) -> str:
        self.calls.append((system, user))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def sample_response():
    return """Here are your formats.

🧩 JSON (JavaScript Object Notation)
💡 Best For: APIs.
```json
{"a":1}
```

---

🧩 YAML (YAML Ain’t Markup Language)
💡 Best For: Configuration files, human-readable structure.
```yaml
a: 1
```
"""


@pytest.fixture
def custom_only_response():
    return """🧩 Markdown Table
💡 Best For: README files.
```markdown
| a |
|---|
| 1 |
```
"""


@pytest.fixture
def fake_generator(sample_response):
    return FakeGenerator(sample_response)


@pytest.fixture
def preferences_path(tmp_path):
    return str(tmp_path / "prefs" / "preferences.json")


@pytest.fixture
def make_generator():
    return FakeGenerator
