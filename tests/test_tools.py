import argparse
import importlib.util
import os

import pytest

from tilecollapse.errors import AttemptsExhaustedError, UnreachablePathError

TOOLS = os.path.join(os.path.dirname(__file__), "..", "tools")

def load_tool(name):
    spec = importlib.util.spec_from_file_location(name, os.path.join(TOOLS, name + ".py"))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod

def cli_args(**kw):
    base = dict(width=6, height=6, seed=1, max_attempts=None, no_border=False)
    base.update(kw)
    return argparse.Namespace(**base)

@pytest.mark.parametrize("exc, prefix", [
    (AttemptsExhaustedError(3), "gave up:"),
    (UnreachablePathError((1, 5), (5, 2)), "error:"),
])
def test_run_exits_cleanly_on_library_errors(monkeypatch, capsys, exc, prefix):
    wfctool = load_tool("wfctool")

    def failing_generate(cfg):
        raise exc

    monkeypatch.setattr(wfctool, "generate", failing_generate)
    with pytest.raises(SystemExit) as e:
        wfctool.run(cli_args())
    assert e.value.code == 1
    assert capsys.readouterr().err.startswith(prefix)

def test_run_rejects_bad_config(monkeypatch, capsys):
    monkeypatch.delenv("TILECOLLAPSE_MAX_ATTEMPTS", raising=False)
    wfctool = load_tool("wfctool")
    with pytest.raises(SystemExit) as e:
        wfctool.run(cli_args(max_attempts=0))
    assert e.value.code == 1
    assert "error:" in capsys.readouterr().err
