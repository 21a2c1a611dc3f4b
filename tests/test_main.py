"""
Tests for configuration loading and the command-line entry point.
"""

import json
import pytest


class TestLoadConfig:
    """Tests for TOML configuration loading."""

    def test_defaults_without_file(self):
        from timezone_pulse.main import load_config

        config = load_config(None)
        assert config['server']['port'] == 8080
        assert config['server']['bind_address'] == '0.0.0.0'
        assert config['search']['recent'] == []
        assert config['display']['default_timezone'] == 'UTC'

    def test_missing_file_gives_defaults(self, tmp_path):
        from timezone_pulse.main import load_config

        config = load_config(str(tmp_path / 'absent.toml'))
        assert config['server']['port'] == 8080

    def test_file_overrides_per_key(self, tmp_path):
        from timezone_pulse.main import load_config

        path = tmp_path / 'config.toml'
        path.write_text(
            '[server]\n'
            'port = 9090\n'
            '\n'
            '[search]\n'
            'recent = ["Asia/Tokyo", "Europe/Paris"]\n'
        )
        config = load_config(str(path))
        assert config['server']['port'] == 9090
        assert config['server']['bind_address'] == '0.0.0.0'
        assert config['search']['recent'] == ['Asia/Tokyo', 'Europe/Paris']
        assert config['display']['default_timezone'] == 'UTC'

    def test_defaults_not_shared(self):
        from timezone_pulse.main import load_config

        first = load_config(None)
        first['search']['recent'].append('Asia/Tokyo')
        assert load_config(None)['search']['recent'] == []


class TestCommandLine:
    """Tests for one-shot CLI queries."""

    def _run(self, capsys, *argv):
        from timezone_pulse.main import main

        code = main(list(argv))
        out = capsys.readouterr().out
        return code, (json.loads(out) if out else None)

    def test_resolve(self, capsys):
        code, data = self._run(capsys, '--resolve', '51.5', '-0.1', '--at', '2024-01-15T12:00:00Z')
        assert code == 0
        assert data['timezone'] == 'Europe/London'
        assert data['zone']['offset'] == '+00:00'

    def test_boundary(self, capsys):
        code, data = self._run(capsys, '--boundary', 'Europe/Berlin')
        assert code == 0
        assert data['boundary_id'] == 'Europe/Paris'

    def test_terminator_with_instant(self, capsys):
        code, data = self._run(capsys, '--terminator', '2024-03-20T12:00:00Z')
        assert code == 0
        assert data['at'].startswith('2024-03-20T12:00:00')
        assert len(data['points']) >= 85

    def test_daylight(self, capsys):
        code, data = self._run(capsys, '--daylight', '0', '0', '--at', '2024-03-20T00:00:00Z')
        assert code == 0
        assert data['daylight'] is False

    def test_dst(self, capsys):
        code, data = self._run(capsys, '--dst', 'Australia/Sydney', '--year', '2024')
        assert code == 0
        assert data['start'].startswith('2024-10')
        assert data['end'].startswith('2024-04')

    def test_dst_unknown_zone(self, capsys):
        code, data = self._run(capsys, '--dst', 'Nowhere/Land', '--year', '2024')
        assert code == 1
        assert data is None

    def test_dst_area_name(self, capsys):
        code, data = self._run(capsys, '--dst', 'America', '--year', '2024')
        assert code == 1
        assert data is None

    @pytest.mark.parametrize('year', ['9999', '1800'])
    def test_dst_year_out_of_range(self, capsys, year):
        code, data = self._run(capsys, '--dst', 'Europe/London', '--year', year)
        assert code == 2
        assert data is None

    def test_search(self, capsys):
        code, data = self._run(capsys, '--search', 'tokyo', '--at', '2024-01-15T12:00:00Z')
        assert code == 0
        assert data[0]['id'] == 'Asia/Tokyo'

    def test_list(self, capsys):
        code, data = self._run(capsys, '--list', '--at', '2024-04-01T12:00:00Z')
        assert code == 0
        assert any(row['id'] == 'Mars/Jezero' for row in data)

    def test_bad_instant(self, capsys):
        code, _ = self._run(capsys, '--daylight', '0', '0', '--at', 'noon')
        assert code == 2

    def test_actions_are_exclusive(self, capsys):
        from timezone_pulse.main import main

        with pytest.raises(SystemExit):
            main(['--list', '--boundary', 'Europe/London'])
