from datetime import timedelta

import pytest


@pytest.fixture()
def directory():
    from identity.users import demo_directory

    return demo_directory()


@pytest.fixture()
def provider(directory):
    from identity.jwt_adapter import JwtIdentityProvider

    return JwtIdentityProvider(directory, secret="test-secret", expires_in=timedelta(minutes=5))
