from debtplan.config import Settings, settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.MAX_AMORTIZATION_MONTHS == 1200
    assert s.DEFAULT_CURRENCY == "USD"
    assert s.CHART_ALL_MAX_MONTHS == 60
    assert s.DEFAULT_PAYMENT_MULTIPLIER == 1.2


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAX_AMORTIZATION_MONTHS", "360")
    monkeypatch.setenv("DEFAULT_CURRENCY", "EUR")
    s = Settings(_env_file=None)
    assert s.MAX_AMORTIZATION_MONTHS == 360
    assert s.DEFAULT_CURRENCY == "EUR"


def test_module_singleton():
    assert isinstance(settings, Settings)
