"""Tests for the diagnostic command line."""

import pytest
import yaml

from blinkt_strip import cli
from blinkt_strip.gpio import MockPins
from conftest import decode_frames


@pytest.fixture
def recorded(monkeypatch, tmp_path):
    """Run the CLI in an empty dir, capturing the pins the driver builds."""
    monkeypatch.chdir(tmp_path)
    made = []

    def fake_get_pins(data_pin, clock_pin, backend):
        pins = MockPins(data_pin, clock_pin)
        pins.backend = backend
        made.append(pins)
        return pins

    monkeypatch.setattr("blinkt_strip.driver.get_pins", fake_get_pins)
    return made


class TestCommands:

    def test_set_one_lamp(self, recorded):
        assert cli.main(["--backend", "mock", "set", "FF0000", "--led", "2", "--brightness", "1", "--hold", "0"]) == 0
        pins = recorded[0]
        assert pins.backend == "mock"
        assert pins.release_count == 1
        frames = decode_frames(pins)
        # startup (45) + the set frame + shutdown (45)
        assert len(frames) == 91
        assert frames[45][2] == (255, 0, 0)
        assert frames[45][3] == (0, 0, 0)

    def test_set_all_lamps(self, recorded):
        assert cli.main(["set", "0000FF", "--brightness", "1", "--hold", "0"]) == 0
        assert decode_frames(recorded[0])[45] == [(0, 0, 255)] * 8

    def test_flash(self, recorded):
        assert cli.main(["flash", "1", "00FF00", "--brightness", "1", "--times", "2", "--interval", "0"]) == 0
        frames = decode_frames(recorded[0])
        assert [frame[1] for frame in frames[45:49]] == [(0, 255, 0), (0, 0, 0)] * 2

    def test_demo(self, recorded):
        assert cli.main(["demo", "--hold", "0"]) == 0
        # startup + 4 colors + blank + shutdown
        assert len(decode_frames(recorded[0])) == 45 + 5 + 45

    def test_bad_color_exits_2(self, recorded, capsys):
        assert cli.main(["set", "XYZ", "--hold", "0"]) == 2
        assert "Invalid color" in capsys.readouterr().err
        assert recorded[0].release_count == 1

    def test_config_file_sets_pins(self, recorded, tmp_path):
        path = tmp_path / "strip.yaml"
        path.write_text(yaml.dump({"pins": {"data_pin": 17, "clock_pin": 27, "backend": "mock"}}))
        assert cli.main(["--config", str(path), "set", "FFFFFF", "--hold", "0"]) == 0
        assert recorded[0].lines() == (17, 27)

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
