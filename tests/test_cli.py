"""Tests pour l'interface en ligne de commande."""

import pytest

from nickel_conf.cli import build_parser, format_value, main


@pytest.fixture
def conf_path(tmp_path):
    return tmp_path / "Kobo eReader.conf"


@pytest.fixture
def base_args(tmp_path, conf_path):
    return [
        "--conf-path", str(conf_path),
        "--log-file", str(tmp_path / "cli.log"),
    ]


class TestParser:
    """Tests de l'analyseur d'arguments."""

    def test_get(self):
        args = build_parser().parse_args(["get", "color-setting"])
        assert args.command == "get"
        assert args.key == "color-setting"

    def test_unknown_key_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get", "bed-time"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestFormatValue:
    """Tests de l'affichage des valeurs."""

    @pytest.mark.parametrize(
        "value, expected",
        [(None, "absent"), (True, "true"), (False, "false"), (75, "75")],
    )
    def test_format(self, value, expected):
        assert format_value(value) == expected


class TestMain:
    """Tests de bout en bout de main()."""

    def test_set_then_get(self, base_args, conf_path, capsys):
        assert main(base_args + ["set", "color-setting", "3000"]) == 0
        assert capsys.readouterr().out == "3000\n"
        assert conf_path.read_text() == "[PowerOptions]\nColorSetting=3000\n"

        assert main(base_args + ["get", "color-setting"]) == 0
        assert capsys.readouterr().out == "3000\n"

    def test_get_absent(self, base_args, capsys):
        assert main(base_args + ["get", "auto-color-enabled"]) == 0
        assert capsys.readouterr().out == "absent\n"

    def test_get_front_light_level_self_heals(
        self, base_args, conf_path, capsys
    ):
        assert main(base_args + ["get", "front-light-level"]) == 0
        assert capsys.readouterr().out == "1\n"
        assert "FrontLightLevel=1" in conf_path.read_text()

    def test_set_boolean(self, base_args, conf_path, capsys):
        main(base_args + ["set", "auto-color-enabled", "false"])
        assert capsys.readouterr().out == "false\n"
        assert "AutoColorEnabled=false" in conf_path.read_text()

    def test_set_front_light_state_absent(self, base_args, conf_path, capsys):
        main(base_args + ["set", "front-light-state", "true"])
        assert capsys.readouterr().out == "absent\n"
        assert not conf_path.exists()

    def test_out_of_range_exits(self, base_args, conf_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(base_args + ["set", "front-light-level", "150"])

        assert exc.value.code == 1
        assert "ValidationError" in capsys.readouterr().out
        assert not conf_path.exists()

    def test_non_integer_exits(self, base_args, capsys):
        with pytest.raises(SystemExit):
            main(base_args + ["set", "color-setting", "warm"])
        assert "entier attendu" in capsys.readouterr().out

    def test_bad_boolean_exits(self, base_args, capsys):
        with pytest.raises(SystemExit):
            main(base_args + ["set", "auto-color-enabled", "yes"])
        assert "ValidationError" in capsys.readouterr().out

    def test_error_is_logged(self, base_args, tmp_path):
        with pytest.raises(SystemExit):
            main(base_args + ["set", "front-light-level", "-1"])
        assert "ValidationError" in (tmp_path / "cli.log").read_text()

    def test_missing_settings_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "absent.toml"),
                  "get", "color-setting"])

        assert exc.value.code == 1
        assert "FileConfigurationError" in capsys.readouterr().out

    def test_settings_file(self, tmp_path, conf_path, capsys):
        settings = tmp_path / "settings.toml"
        settings.write_text(
            f'conf_path = "{conf_path}"\n'
            f'log_file = "{tmp_path / "from_settings.log"}"\n'
        )
        conf_path.write_text("[PowerOptions]\nFrontLightLevel=40\n")

        assert main(["--config", str(settings),
                     "get", "front-light-level"]) == 0
        assert capsys.readouterr().out == "40\n"
