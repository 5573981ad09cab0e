"""Tests for demo drivers and the command line."""
import json

import pytest

from cars import app_builder, app_car_factory, app_factory, app_singleton, run_all, run_demo
from cars.__main__ import main
from cars.abstract_factory import SedanCarFactory
from cars.builder import Director
from cars.demos import DEMOS
from cars.factory_method import RhinoCarFactory
from validation import KNOWN_DEMOS


class TestDrivers:
    """Tests for the app_* drivers."""

    def test_app_factory(self):
        """Test the factory driver shows the car cost."""
        printed = []
        lines = app_factory(RhinoCarFactory(), out=printed.append)

        assert lines == printed
        assert lines[-1] == '[RHINO] Car Cost: 100,000 MXN'

    def test_app_factory_without_factory(self):
        """Test a missing factory is reported, not raised."""
        lines = app_factory(None, out=lambda line: None)

        assert lines[-1] == '--- No factory provided ---'

    def test_app_car_factory(self):
        """Test the family driver uses both GPS units."""
        lines = app_car_factory(SedanCarFactory(), out=lambda line: None)

        assert lines[-2:] == ['[SEDAN] Mastodon GPS', '[SEDAN] Rhino GPS']

    def test_app_car_factory_without_factory(self):
        lines = app_car_factory(None, out=lambda line: None)

        assert lines[-1] == '--- No factory provided ---'

    def test_app_builder(self):
        """Test the builder driver prints both editions."""
        lines = app_builder(Director(), out=lambda line: None)

        assert '--- Mastodon Sedan CVT ---' in lines
        assert '--- Mastodon Sedan Signature ---' in lines
        assert "MastodonSedanCar(edition='cvt', model='sedan', air_bags=4, color='blue')" in lines
        assert "MastodonSedanCar(edition='signature', model='sedan', air_bags=8, color='red')" in lines

    def test_app_builder_without_director(self):
        lines = app_builder(None, out=lambda line: None)

        assert lines[-1] == '--- No director provided ---'

    def test_app_singleton(self):
        """Test the singleton driver reports identity for every request."""
        lines = app_singleton(('v-1', 'v-2', 'v-3'), out=lambda line: None)

        assert lines[:2] == ['True', 'True']
        assert lines[2].startswith('version: ')


class TestRunner:
    """Tests for running demos by name."""

    def test_demo_names_match_config_choices(self):
        """Test the runner and the config schema know the same demos."""
        assert tuple(DEMOS) == KNOWN_DEMOS

    def test_run_all(self):
        """Test every demo runs and produces output."""
        results = run_all(out=lambda line: None)

        assert list(results) == list(KNOWN_DEMOS)
        assert all(results[name] for name in KNOWN_DEMOS)
        assert results['factory'].count('[MASTODON] Car Cost: 300,000 MXN') == 2

    def test_unknown_demo_returns_none(self):
        """Test a failing demo is logged and reported as None."""
        assert run_demo('prototype', out=lambda line: None) is None

    def test_empty_versions_fail_softly(self):
        """Test invalid singleton input does not abort the runner."""
        results = run_all(['singleton', 'builder'], out=lambda line: None, versions=[])

        assert results['singleton'] is None
        assert results['builder']


class TestCommandLine:
    """Tests for python -m cars."""

    def test_runs_selected_demo(self, capsys):
        """Test only the requested demo runs."""
        assert main(['factory']) == 0

        out = capsys.readouterr().out
        assert '[RHINO] Car Cost: 100,000 MXN' in out
        assert 'GPS' not in out

    def test_runs_demos_from_config(self, tmp_path, capsys):
        """Test demos.enabled from a config file."""
        config_file = tmp_path / 'demo.json'
        config_file.write_text(json.dumps({
            'logging': {'log_level': 'error'},
            'demos': {'enabled': ['abstract-factory']}
        }))

        assert main(['--config', str(config_file)]) == 0

        out = capsys.readouterr().out
        assert '[HATCHBACK] Rhino GPS' in out
        assert 'Car Cost' not in out

    def test_unknown_demo_exits_2(self, capsys):
        """Test unknown demo names are a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(['prototype'])

        assert exc_info.value.code == 2
        assert 'unknown demo' in capsys.readouterr().err

    def test_invalid_config_exits_1(self, tmp_path, capsys):
        """Test an invalid config file is reported with its errors."""
        config_file = tmp_path / 'demo.yaml'
        config_file.write_text('demos:\n  enabled: [prototype]\n')

        assert main(['--config', str(config_file)]) == 1

        err = capsys.readouterr().err
        assert 'configuration error' in err
        assert 'prototype' in err
        assert 'Traceback' not in err

    def test_missing_config_exits_1(self, tmp_path, capsys):
        assert main(['--config', str(tmp_path / 'absent.yaml')]) == 1

        err = capsys.readouterr().err
        assert 'configuration error' in err
        assert 'Traceback' not in err
