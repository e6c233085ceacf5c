import pytest

LAYERS = ("unit", "contract", "integration", "e2e")


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", help="运行环境: dev, ci, prod")


# Hook 1: 注册分层标记
def pytest_configure(config):
    """注册测试分层标记，避免未知标记告警"""
    config.addinivalue_line("markers", "unit: 单元测试，纯函数与值对象")
    config.addinivalue_line("markers", "contract: 契约测试，协作者接口与数据形状")
    config.addinivalue_line("markers", "integration: 集成测试，结账服务 + 内存替身")
    config.addinivalue_line("markers", "e2e: 端到端结账场景")
    config.addinivalue_line("markers", "slow: 慢测试，prod 环境下跳过")


# Hook 2: 按分层排序，并在 prod 环境跳过慢测试
def pytest_collection_modifyitems(config, items):
    """修改收集到的测试项，根据环境和标记进行过滤"""
    if config.getoption("--env") == "prod":
        for item in items:
            if item.get_closest_marker("slow"):
                item.add_marker(pytest.mark.skip(reason="生产环境跳过慢测试"))

    def item_priority(item):
        markers = {m.name for m in item.iter_markers()}
        for rank, layer in enumerate(LAYERS):
            if layer in markers:
                return rank
        return len(LAYERS)

    items.sort(key=item_priority)
