import json

import pytest
from structlog import get_logger

from strmap import encode
from strmap.utils.logging import LoggingOutput, setup_logging
from tests.records import StubMapRecord


@pytest.fixture
def json_logging(capsys):
    setup_logging(logging_output=LoggingOutput.JSON, debug=True)
    yield capsys
    setup_logging(logging_output=LoggingOutput.NULL, debug=True)


def _read_events(capsys) -> list[dict]:
    return [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith('{')]


def test_json_output(json_logging):
    log = get_logger()
    log.info('something happened', answer=42)
    events = _read_events(json_logging)
    assert len(events) == 1
    assert events[0]['event'] == 'something happened'
    assert events[0]['answer'] == 42
    assert events[0]['level'] == 'info'


def test_codec_debug_events(json_logging):
    encode(StubMapRecord('x', 1))
    events = _read_events(json_logging)
    assert any(event['event'] == 'record-level conversion' for event in events)


def test_debug_disabled(capsys):
    setup_logging(logging_output=LoggingOutput.JSON, debug=False)
    try:
        log = get_logger()
        log.debug('hidden')
        log.warning('shown')
        events = _read_events(capsys)
    finally:
        setup_logging(logging_output=LoggingOutput.NULL, debug=True)
    assert [event['event'] for event in events] == ['shown']


def test_null_output(capsys):
    setup_logging(logging_output=LoggingOutput.NULL)
    get_logger().warning('dropped')
    assert capsys.readouterr().err == ''
