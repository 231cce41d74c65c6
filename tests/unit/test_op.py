import subprocess
from pathlib import Path

from share1password.op import OnePassword, share_args


def test_share_args_without_recipients():
    assert share_args("id1", "Vault", "7d", []) == [
        "item",
        "share",
        "id1",
        "--vault",
        "Vault",
        "--expires-in",
        "7d",
    ]


def test_share_args_keeps_recipient_order():
    args = share_args("id1", "Vault", "7d", ["b@y.com", "a@x.com"])
    assert args[-4:] == ["--emails", "b@y.com", "--emails", "a@x.com"]


class Recorder:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.result = (returncode, stdout, stderr)
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, *self.result)


def test_account_check_discards_stdout():
    runner = Recorder(returncode=1, stdout=None, stderr=None)
    assert not OnePassword(runner=runner).is_signed_in()
    cmd, kwargs = runner.calls[0]
    assert cmd == ["op", "account", "list", "--format=json"]
    assert kwargs == {"stdout": subprocess.DEVNULL}


def test_custom_binary_and_capture():
    runner = Recorder(stdout=b'{"id": "x"}', stderr=b"warn")
    output = OnePassword(binary="/opt/op", runner=runner).create_item(
        "[p] - 01.01.2026", "Vault", Path("/tmp/template.json")
    )
    cmd, kwargs = runner.calls[0]
    assert cmd == [
        "/opt/op",
        "item",
        "create",
        "--title",
        "[p] - 01.01.2026",
        "--vault",
        "Vault",
        "--template",
        str(Path("/tmp/template.json")),
        "--format=json",
    ]
    assert kwargs == {"stdout": subprocess.PIPE, "stderr": subprocess.PIPE}
    assert output.ok
    assert output.stdout == '{"id": "x"}'
    assert output.stderr == "warn"


def test_undecodable_output_is_replaced():
    runner = Recorder(returncode=2, stdout=b"link\xff", stderr=b"\xfeoops")
    output = OnePassword(runner=runner).share_item("id", "Vault", "7d")
    assert not output.ok
    assert output.stdout == "link�"
    assert output.stderr == "�oops"
