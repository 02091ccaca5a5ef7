"""End-to-end tests of the draw-network command."""

import pytest

from netdraw.cli import main


class TestCommandLine:
    def test_help(self, capsys):
        assert main(["-help"]) == 0
        assert "Usage: draw-network" in capsys.readouterr().out

    def test_missing_required_options(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-o", "out.png"])
        assert exc_info.value.code != 0
        assert "Usage" in capsys.readouterr().err

    def test_draw_network(self, triangle_dir, tmp_path):
        output = tmp_path / "network.png"

        assert main(["-g", str(triangle_dir), "-o", str(output), "-w", "4", "-h", "4"]) == 0
        assert output.exists()

    def test_draw_network_with_overlays(self, triangle_dir, tmp_path):
        bound = tmp_path / "bound.poly"
        bound.write_text("b\n1\n 9.18 48.77\n 9.2 48.77\n 9.2 48.78\nEND\nEND\n")
        demand = tmp_path / "demand.csv"
        demand.write_text("origin,destination\n0,2\n1,0\n")
        output = tmp_path / "network.svg"

        code = main([
            "-g", str(triangle_dir), "-o", str(output), "-fmt", "SVG",
            "-b", str(bound), "-d", str(demand), "-c", str(bound),
        ])

        assert code == 0
        assert output.read_text().lstrip().startswith("<?xml")

    def test_draw_flow_patterns(self, triangle_dir, write_flows, tmp_path):
        flows = write_flows(["1,10", "1,20", "1,30", "1,40"] + ["2,50", "2,60", "2,70", "2,80"])
        output = tmp_path / "flows.pdf"

        code = main([
            "-g", str(triangle_dir), "-o", str(output), "-fmt", "pdf",
            "-f", str(flows), "-p", "2", "-i",
        ])

        assert code == 0
        assert output.read_bytes().startswith(b"%PDF")

    def test_corrupt_flow_file(self, triangle_dir, write_flows, tmp_path, capsys):
        flows = write_flows(["1,10", "1,20", "1,30", "1,40", "3,1"])

        code = main(["-g", str(triangle_dir), "-o", str(tmp_path / "f.png"), "-f", str(flows)])

        assert code == 1
        err = capsys.readouterr().err
        assert "flow file corrupt" in err
        assert "-help" in err

    def test_unknown_format(self, triangle_dir, tmp_path, capsys):
        code = main(["-g", str(triangle_dir), "-o", str(tmp_path / "x.gif"), "-fmt", "GIF"])

        assert code == 1
        assert "unrecognized file format" in capsys.readouterr().err

    @pytest.mark.parametrize("option", ["-p", "-import-period"])
    def test_non_positive_period(self, triangle_dir, tmp_path, option):
        code = main(["-g", str(triangle_dir), "-o", str(tmp_path / "x.png"), option, "0"])

        assert code == 1

    def test_unknown_endpoint(self, write_network, tmp_path, capsys):
        directory = write_network(["1,48.0,9.0"], ["1,2,10,100,50"])

        code = main(["-g", str(directory), "-o", str(tmp_path / "x.png")])

        assert code == 1
        assert "unknown endpoint 2" in capsys.readouterr().err

    def test_stuttgart_cleanup_rejects_other_networks(self, triangle_dir, tmp_path, capsys):
        code = main(["-g", str(triangle_dir), "-o", str(tmp_path / "x.png"), "-stuttgart"])

        assert code == 1
        assert "unrecognized Stuttgart network" in capsys.readouterr().err

    def test_invalid_environment_setting(self, triangle_dir, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("NETDRAW_IMPORT_ANALYSIS_PERIOD", "0")

        code = main(["-g", str(triangle_dir), "-o", str(tmp_path / "x.png")])

        assert code == 1
        err = capsys.readouterr().err
        assert "invalid configuration" in err
        assert "-help" in err

    def test_clip_file_without_sections(self, triangle_dir, tmp_path, capsys):
        clip = tmp_path / "clip.poly"
        clip.write_text("empty\nEND\n")
        output = tmp_path / "x.png"

        code = main(["-g", str(triangle_dir), "-o", str(output), "-c", str(clip)])

        assert code == 1
        assert "no sections" in capsys.readouterr().err
        assert not output.exists()

    def test_latitude_out_of_range(self, write_network, tmp_path, capsys):
        directory = write_network(["1,95.0,9.0", "2,48.0,9.0"], ["1,2,10,100,50"])

        code = main(["-g", str(directory), "-o", str(tmp_path / "x.png")])

        assert code == 1
        assert "latitude out of range" in capsys.readouterr().err
