from __future__ import annotations

import pytest

from bindmap.adapters.kubernetes import decode_service_binding
from bindmap.domain.correlation import BindingRequestMapper, TypeResolver
from tests.support.kubernetes import FakeLister, FakeRESTMapper


@pytest.fixture
def rest_mapper() -> FakeRESTMapper:
    return FakeRESTMapper()


@pytest.fixture
def resolver(rest_mapper: FakeRESTMapper) -> TypeResolver:
    return TypeResolver(rest_mapper=rest_mapper)


@pytest.fixture
def lister() -> FakeLister:
    return FakeLister()


@pytest.fixture
def mapper(lister: FakeLister, resolver: TypeResolver) -> BindingRequestMapper:
    return BindingRequestMapper(lister=lister, resolver=resolver, decode=decode_service_binding)
