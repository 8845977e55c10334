import pytest

from gamenet.address import SocketAddress, SocketAddressError, create_ipv4_from_string


def test_str_formats_host_and_port():
    assert str(SocketAddress(0x7F000001, 8080)) == "127.0.0.1:8080"


def test_sockaddr_round_trip():
    sockaddr = ("10.1.2.3", 4000)
    assert SocketAddress.from_sockaddr(sockaddr).as_sockaddr() == sockaddr


def test_integer_round_trip_through_sockaddr():
    original = SocketAddress(0xC0A80001, 65535)
    assert SocketAddress.from_sockaddr(original.as_sockaddr()) == original


def test_create_from_string_with_port():
    result = create_ipv4_from_string("127.0.0.1:9000")
    assert result == SocketAddress.from_sockaddr(("127.0.0.1", 9000))


def test_create_from_string_round_trips_text():
    text = "192.168.10.20:1234"
    assert str(create_ipv4_from_string(text)) == text


def test_create_from_string_without_port_uses_zero():
    result = create_ipv4_from_string("127.0.0.1")
    assert result.port == 0
    assert result.as_sockaddr()[0] == "127.0.0.1"


def test_create_from_string_bad_service_raises():
    with pytest.raises(SocketAddressError):
        create_ipv4_from_string("127.0.0.1:no-such-service-name")


@pytest.mark.parametrize(
    "address, port",
    [(-1, 80), (0x100000000, 80), (0, -1), (0, 0x10000)],
)
def test_out_of_range_values_rejected(address, port):
    with pytest.raises(ValueError):
        SocketAddress(address, port)


def test_from_sockaddr_rejects_ipv6():
    with pytest.raises(SocketAddressError):
        SocketAddress.from_sockaddr(("::1", 80))


def test_equal_addresses_hash_alike():
    first = SocketAddress.from_sockaddr(("10.0.0.1", 5))
    second = create_ipv4_from_string("10.0.0.1:5")
    assert len({first, second}) == 1