import os
import stat

import pytest

from models.script_model import Script


def make_script(name, category=None, description=None, path=None):
    return Script(
        path=path or f"/tmp/{name}",
        name=name,
        description=description,
        category=category,
    )


@pytest.fixture
def write_script(tmp_path):
    """Create a file under tmp_path; executable unless told otherwise."""

    def _write(relative, content="", executable=True):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if executable:
            mode = os.stat(path).st_mode
            os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _write


@pytest.fixture
def scripts():
    return [
        make_script("a.sh"),
        make_script("b.sh", category="lib", description="Second"),
        make_script("c.sh"),
    ]
