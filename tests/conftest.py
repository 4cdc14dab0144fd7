import pytest

PUB_KEY = "HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4="
LEGACY_PUB_KEY = f"@{PUB_KEY}.ed25519"


@pytest.fixture
def pub_key() -> str:
    return PUB_KEY


@pytest.fixture
def legacy_pub_key() -> str:
    return LEGACY_PUB_KEY
