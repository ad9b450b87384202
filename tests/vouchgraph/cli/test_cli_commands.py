"""Tests for the CLI commands and argument handling."""

import json
import os
from unittest.mock import patch

import pytest

from vouchgraph import __version__
from vouchgraph.cli.commands import block_number, get_roots, vouch_graph, vouches
from vouchgraph.cli.main import _ledger_config, build_parser, main
from vouchgraph.config.settings import LedgerConfig
from vouchgraph.errors import TransientLookupError

START = "0x" + "11" * 32
VOUCHER = "0x" + "22" * 32
ROOT = "0x" + "33" * 32


@pytest.fixture
def config():
    return LedgerConfig(url="http://ledger.invalid/v1")


class TestBlockNumber:

    @pytest.mark.asyncio
    async def test_prints_height(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer
        ledger = make_ledger(block_height=1234)

        code = await block_number.run(config, client=ledger, console=console)

        assert code == 0
        assert buffer.getvalue().strip() == "1234"


class TestGetRoots:

    @pytest.mark.asyncio
    async def test_lists_roots(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer
        ledger = make_ledger(roots=["0xaa", "bb"])

        code = await get_roots.run(config, client=ledger, console=console)

        assert code == 0
        output = buffer.getvalue()
        assert "Found 2 root addresses:" in output
        assert "  0xaa" in output
        assert "  0xbb" in output

    @pytest.mark.asyncio
    async def test_empty_registry(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer

        code = await get_roots.run(config, client=make_ledger(), console=console)

        assert code == 0
        assert "No root addresses found" in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_json_output(self, make_ledger, capsys, config):
        ledger = make_ledger(roots=["aa", "0xbb"])

        code = await get_roots.run(config, json_output=True, client=ledger)

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"roots": ["0xaa", "0xbb"]}

    @pytest.mark.asyncio
    async def test_error_json(self, make_ledger, capsys, config):
        ledger = make_ledger(roots_error=TransientLookupError("node down"))

        code = await get_roots.run(config, json_output=True, client=ledger)

        assert code == 1
        assert json.loads(capsys.readouterr().out) == {"status": "error", "error": "node down"}

    @pytest.mark.asyncio
    async def test_error_text(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer
        ledger = make_ledger(roots_error=TransientLookupError("node down"))

        code = await get_roots.run(config, client=ledger, console=console)

        assert code == 1
        assert "Error: fetching root addresses: node down" in buffer.getvalue()


class TestVouches:

    @pytest.mark.asyncio
    async def test_prints_json(self, make_ledger, capsys, config):
        ledger = make_ledger(vouches={START: [VOUCHER, ROOT]})

        code = await vouches.run(START[2:].upper(), config, client=ledger)

        assert code == 0
        assert ledger.calls == [START]
        assert json.loads(capsys.readouterr().out) == [
            {"address": VOUCHER, "epoch": 100},
            {"address": ROOT, "epoch": 101},
        ]

    @pytest.mark.asyncio
    async def test_invalid_address(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer
        ledger = make_ledger()

        code = await vouches.run("0xnothex", config, client=ledger, console=console)

        assert code == 1
        assert ledger.calls == []
        assert "hexadecimal" in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_lookup_failure(self, make_ledger, console_buffer, config):
        console, buffer = console_buffer
        ledger = make_ledger(failing=[START])

        code = await vouches.run(START, config, client=ledger, console=console)

        assert code == 1
        assert "Error: fetching vouches" in buffer.getvalue()


class TestVouchGraph:

    @pytest.mark.asyncio
    async def test_writes_mermaid_file(self, make_ledger, console_buffer, config, tmp_path):
        console, buffer = console_buffer
        output = tmp_path / "graph.md"
        ledger = make_ledger(vouches={START: [VOUCHER], VOUCHER: [ROOT]}, roots=[ROOT])

        code = await vouch_graph.run(
            START,
            config,
            vouch_depth=3,
            score_depth=0,
            output=output,
            use_default_names=False,
            client=ledger,
            console=console,
        )

        assert code == 0
        content = output.read_text()
        assert content.startswith("```mermaid\ngraph TD\n")
        assert f"{VOUCHER} --> {START}" in content
        assert f"{ROOT} --> {VOUCHER}" in content
        assert "(50K)" in content
        assert "(100K)" in content
        printed = buffer.getvalue()
        assert "Found 1 root addresses, 3 addresses and 2 vouching relationships" in printed
        assert f"Mermaid graph written to {output}" in printed

    @pytest.mark.asyncio
    async def test_name_mapping_file(self, make_ledger, console_buffer, config, tmp_path):
        console, _ = console_buffer
        names = tmp_path / "names.json"
        names.write_text(json.dumps({"validators": {VOUCHER: "alice"}}))
        output = tmp_path / "graph.md"
        ledger = make_ledger(vouches={START: [VOUCHER]}, roots=[ROOT])

        code = await vouch_graph.run(
            START,
            config,
            output=output,
            name_sources=[str(names)],
            use_default_names=False,
            client=ledger,
            console=console,
        )

        assert code == 0
        assert "<br/>alice" in output.read_text()

    @pytest.mark.asyncio
    async def test_unreadable_name_mapping_skipped(self, make_ledger, console_buffer, config, tmp_path):
        console, _ = console_buffer
        names = tmp_path / "names.json"
        names.write_bytes(b"\xff\xfe\x00garbage")
        output = tmp_path / "graph.md"
        ledger = make_ledger(vouches={START: [VOUCHER]}, roots=[ROOT])

        code = await vouch_graph.run(
            START,
            config,
            output=output,
            name_sources=[str(names)],
            use_default_names=False,
            client=ledger,
            console=console,
        )

        assert code == 0
        assert "<br/>" not in output.read_text()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kwargs, message", [
        ({"vouch_depth": 0}, "Vouch depth must be a positive number"),
        ({"score_depth": -1}, "Score depth must be a non-negative number"),
        ({"concurrency": 0}, "Concurrency must be a positive number"),
    ])
    async def test_invalid_options(self, make_ledger, console_buffer, config, tmp_path, kwargs, message):
        console, buffer = console_buffer
        ledger = make_ledger(roots=[ROOT])

        code = await vouch_graph.run(
            START, config, output=tmp_path / "graph.md", use_default_names=False,
            client=ledger, console=console, **kwargs,
        )

        assert code == 1
        assert message in buffer.getvalue()
        assert not (tmp_path / "graph.md").exists()

    @pytest.mark.asyncio
    async def test_root_failure_aborts(self, make_ledger, console_buffer, config, tmp_path):
        console, buffer = console_buffer
        output = tmp_path / "graph.md"
        ledger = make_ledger(roots_error=TransientLookupError("node down"))

        code = await vouch_graph.run(
            START, config, output=output, use_default_names=False,
            client=ledger, console=console,
        )

        assert code == 1
        assert "Error: generating vouch graph" in buffer.getvalue()
        assert not output.exists()
        assert ledger.calls == []


class TestMain:

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == f"vouchgraph {__version__}"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: vouchgraph" in capsys.readouterr().out

    def test_invalid_vouch_depth(self):
        assert main(["--url", "http://ledger.invalid/v1", "vouch-graph", START, "--vouch-depth", "0"]) == 1

    def test_invalid_address(self):
        assert main(["--url", "http://ledger.invalid/v1", "vouches", "0xzz"]) == 1

    def test_graph_defaults(self):
        args = build_parser().parse_args(["vouch-graph", START])

        assert args.vouch_depth == 4
        assert args.score_depth == 4
        assert str(args.output) == "vouch-graph.md"
        assert args.name_mappings == []
        assert args.no_default_names is False
        assert args.concurrency == 1

    @patch.dict(os.environ, {}, clear=True)
    def test_ledger_config_flags(self):
        args = build_parser().parse_args(["--testnet", "block-number"])
        assert _ledger_config(args).base_url == "https://testnet.openlibra.io/v1"

        args = build_parser().parse_args(["--testnet", "--url", "http://node/v1", "block-number"])
        assert _ledger_config(args).base_url == "http://node/v1"
