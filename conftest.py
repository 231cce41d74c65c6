import json
import subprocess
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from share1password.op import OnePassword

SECURE_NOTE_TEMPLATE = {
    "title": "",
    "category": "SECURE_NOTE",
    "fields": [
        {
            "id": "notesPlain",
            "type": "STRING",
            "purpose": "NOTES",
            "label": "notesPlain",
            "value": "",
        }
    ],
}

SHARE_LINK = "https://share.1password.com/s#6sd8fx9Qk2\n"


class FakeOp:
    """Stands in for `subprocess.run` and records every `op` invocation.

    Responses are keyed on the first two arguments, e.g. "vault get".
    """

    def __init__(self: "FakeOp") -> None:
        self.responses: Dict[str, Tuple[int, str, str]] = {
            "item template": (0, json.dumps(SECURE_NOTE_TEMPLATE), ""),
            "item create": (0, json.dumps({"id": "abc123", "title": "x"}), ""),
            "item share": (0, SHARE_LINK, ""),
        }
        self.calls: List[List[str]] = []
        self.templates: List[dict] = []

    def __call__(
        self: "FakeOp", cmd: List[str], **kwargs
    ) -> subprocess.CompletedProcess:
        args = list(cmd[1:])
        self.calls.append(args)
        if args[:2] == ["item", "create"]:
            template = Path(args[args.index("--template") + 1])
            self.templates.append(json.loads(template.read_text(encoding="utf-8")))
        returncode, stdout, stderr = self.responses.get(" ".join(args[:2]), (0, "", ""))
        return subprocess.CompletedProcess(
            cmd, returncode, stdout.encode(), stderr.encode()
        )

    def respond(
        self: "FakeOp", key: str, returncode: int, stdout: str = "", stderr: str = ""
    ) -> None:
        self.responses[key] = (returncode, stdout, stderr)


@pytest.fixture
def fake_op() -> FakeOp:
    return FakeOp()


@pytest.fixture
def op(fake_op: FakeOp) -> OnePassword:
    return OnePassword(runner=fake_op)
