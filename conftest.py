import logging

import pytest

from common.fakes import InMemoryOrderRepository, RecordingNotifier, StubPaymentGateway

# 激活自定义插件
pytest_plugins = [
    "common.plugins.layers",
]


@pytest.fixture(scope="function")
def clean_config_env(monkeypatch):
    # 隔离外部环境变量，保证配置加载结果确定
    for name in ("CHECKOUT_CONFIG", "CHECKOUT_PREMIUM_DISCOUNT",
                 "CHECKOUT_CURRENCY_SYMBOL", "CHECKOUT_CONFIRMATION_SUBJECT"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture(scope="function")
def settings_file(tmp_path):
    p = tmp_path / "checkout.yaml"
    p.write_text(
        "checkout:\n"
        "  premium_discount: '0.20'\n"
        "  currency_symbol: '$'\n"
        "  confirmation_subject: 'Order confirmed'\n",
        encoding="utf-8",
    )
    yield p
    p.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def log_capture(caplog):
    caplog.set_level(logging.DEBUG, logger="checkout")
    return caplog


def pytest_generate_tests(metafunc):
    if "standard_raw_total" in metafunc.fixturenames:
        metafunc.parametrize("standard_raw_total", ["0", "0.01", "199.99", "200.0"],
                             ids=["zero", "cent", "odd", "round"])


@pytest.fixture
def gateway():
    return StubPaymentGateway()


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def notifier():
    return RecordingNotifier()
