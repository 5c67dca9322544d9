import httpx

from prepr.core.transport import classify_transport_exception, is_connection_reset
from prepr.exceptions import RequestClosedError, TimeoutError, TransportError


class TestIsConnectionReset:
    def test_connection_reset_error(self):
        assert is_connection_reset(ConnectionResetError(104, "Connection reset by peer"))

    def test_wrapped_cause(self):
        try:
            try:
                raise ConnectionResetError(104, "reset")
            except ConnectionResetError as e:
                raise httpx.ReadError("read failed") from e
        except httpx.ReadError as wrapped:
            assert is_connection_reset(wrapped)

    def test_message_marker(self):
        assert is_connection_reset(httpx.ReadError("ECONNRESET"))

    def test_other(self):
        assert not is_connection_reset(httpx.ConnectError("Connection refused"))


class TestClassifyTransportException:
    def test_timeout(self):
        error = classify_transport_exception(httpx.ReadTimeout("timed out"))

        assert isinstance(error, TimeoutError)
        assert str(error) == "request timeout"
        assert isinstance(error.cause, httpx.ReadTimeout)

    def test_reset_is_timeout(self):
        error = classify_transport_exception(ConnectionResetError(104, "reset"), True)
        assert isinstance(error, TimeoutError)

    def test_protocol_error_mid_body(self):
        error = classify_transport_exception(
            httpx.RemoteProtocolError("peer closed connection"), response_started=True
        )

        assert isinstance(error, RequestClosedError)
        assert str(error) == "request closed"

    def test_protocol_error_before_response(self):
        error = classify_transport_exception(
            httpx.RemoteProtocolError("Server disconnected"), response_started=False
        )

        assert type(error) is TransportError
        assert str(error) == "request failed: Server disconnected"

    def test_generic(self):
        error = classify_transport_exception(OSError("Name or service not known"))

        assert type(error) is TransportError
        assert str(error) == "request failed: Name or service not known"
