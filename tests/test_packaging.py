import ast
from pathlib import Path

SETUP_PY = Path(__file__).resolve().parent.parent / "setup.py"


def _setup_keywords():
    tree = ast.parse(SETUP_PY.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup":
            return {
                kw.arg: kw.value.value
                for kw in node.keywords
                if isinstance(kw.value, ast.Constant)
            }
    raise AssertionError("setup() call not found")


def test_metadata_names_this_project():
    keywords = _setup_keywords()

    assert keywords["name"] == "django-tanda"
    assert "tarxemo" not in keywords["author"].lower()
    assert "tarxemo" not in keywords["url"].lower()
