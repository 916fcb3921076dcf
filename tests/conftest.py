"""
Pytest fixtures for the SendEvents function.
"""
import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Function app root, so SendEvents imports the way the Functions host loads it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src', 'send-events'))

import azure.functions as func


@pytest.fixture
def eventhub_env():
    with patch.dict(os.environ, {
        'EventHubConnectionString': 'Endpoint=sb://test.servicebus.windows.net/;SharedAccessKeyName=k;SharedAccessKey=s',
        'EventHubName': 'test-hub',
    }):
        yield


@pytest.fixture
def batch():
    return MagicMock()


@pytest.fixture
def producer(batch):
    """Mocked aio producer; usable with `async with`."""
    producer = MagicMock()
    producer.__aenter__.return_value = producer
    producer.__aexit__.return_value = False
    producer.create_batch = AsyncMock(return_value=batch)
    producer.send_batch = AsyncMock()
    return producer


@pytest.fixture
def producer_factory(producer):
    with patch('SendEvents.EventHubProducerClient') as client_cls:
        client_cls.from_connection_string.return_value = producer
        yield client_cls.from_connection_string


@pytest.fixture
def make_request():
    def _make(body=b'', method='POST'):
        return func.HttpRequest(method=method, url='/api/SendEvents', headers={}, body=body)
    return _make
