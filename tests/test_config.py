import json

import pytest

from bracketeer import PrizeDistribution, TournamentConfig, load_config
from bracketeer.exceptions import ConfigurationError


def _write(tmp_path, content, name="tournament.json"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    config = TournamentConfig(name="Copa")

    assert config.format == "single-elimination"
    assert (config.group_capacity, config.advance_per_group) == (8, 4)
    assert config.platform_fee_percent == 10.0
    assert config.currency == "MXN"
    assert config.prize_distribution == []


def test_from_dict_fills_missing_keys():
    config = TournamentConfig.from_dict({"format": "swiss"})

    assert config.name == "Untitled Tournament"
    assert config.format == "swiss"
    assert config.group_capacity == 8


def test_dict_round_trip():
    config = TournamentConfig(
        name="Copa",
        format="free-for-all",
        group_capacity=6,
        advance_per_group=3,
        platform_fee_percent=7.5,
        currency="USD",
        prize_distribution=[
            PrizeDistribution(position="1", percentage=70, label="1er Lugar"),
            PrizeDistribution(position="2", percentage=30),
        ],
    )

    assert TournamentConfig.from_dict(config.to_dict()) == config


def test_financial_config():
    config = TournamentConfig(name="Copa", platform_fee_percent=5, currency="EUR")

    financial = config.financial_config()
    assert (financial.platform_fee_percent, financial.currency) == (5, "EUR")


def test_load_config(tmp_path):
    path = _write(
        tmp_path,
        json.dumps(
            {
                "name": "Liga",
                "format": "round-robin",
                "prize_distribution": [{"position": "1", "percentage": 100}],
            }
        ),
    )

    config = load_config(path)
    assert config.name == "Liga"
    assert config.format == "round-robin"
    assert config.prize_distribution[0].percentage == 100


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"prize_distribution": [{"position": "1"}]}),
        json.dumps({"prize_distribution": [{"position": "1", "percentage": "all"}]}),
    ],
)
def test_malformed_config(tmp_path, content):
    with pytest.raises(ConfigurationError):
        load_config(_write(tmp_path, content))
