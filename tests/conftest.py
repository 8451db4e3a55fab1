import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write ``text`` to ``tmp_path/name`` and return the path as a string."""

    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def checkout_test(write_file):
    return write_file(
        "checkout_test.dart",
        "void main() {\n"
        "  patrolTest('checkout: user can pay', ($) async {\n"
        "    await $.pumpWidgetAndSettle(const App());\n"
        "  });\n"
        "\n"
        "  patrolTest('no tag here', ($) async {});\n"
        "}\n",
    )
