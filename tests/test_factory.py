import pytest

from cloudwire.base.client_cache import ClientCache
from cloudwire.factory import universal_factory
from cloudwire.cloudformation import CloudFormationClient
from cloudwire.dynamodb import DynamoDbClient
from cloudwire.sqs import SqsClient

from conftest import CONFIG


@pytest.fixture(autouse=True)
def _fresh_cache():
    ClientCache().clear()
    yield
    ClientCache().clear()


class TestUniversalFactory:
    def test_dynamodb(self):
        client = universal_factory("dynamodb", CONFIG)
        assert isinstance(client, DynamoDbClient)
        assert client.region == "us-east-1"

    def test_cloudformation(self):
        assert isinstance(universal_factory("cloudformation", CONFIG), CloudFormationClient)

    def test_sqs(self):
        assert isinstance(universal_factory("sqs", CONFIG), SqsClient)

    def test_cached_per_config(self):
        a = universal_factory("dynamodb", CONFIG)
        b = universal_factory("dynamodb", dict(CONFIG))
        c = universal_factory("dynamodb", {**CONFIG, "region_name": "eu-west-1"})
        assert a is b
        assert a is not c

    def test_cache_disabled(self):
        a = universal_factory("sqs", CONFIG, cache=False)
        b = universal_factory("sqs", CONFIG, cache=False)
        assert a is not b
        a.close()
        b.close()

    def test_unsupported_service(self):
        with pytest.raises(ValueError, match="Unsupported service"):
            universal_factory("s3", CONFIG)

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            universal_factory("dynamodb", {"bucket": "nope"})

    def test_closed_client_replaced(self, http):
        with universal_factory("dynamodb", CONFIG) as first:
            pass
        assert first.closed
        second = universal_factory("dynamodb", CONFIG)
        assert second is not first
        assert not second.closed
        assert universal_factory("dynamodb", CONFIG) is second
        second._http = http
        http.add_response({"TableNames": ["users"]})
        assert list(second.list_tables()) == ["users"]
