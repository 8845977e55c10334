# gamenet

Building blocks for multiplayer game networking: socket objects, byte-aligned and
bit-packed serialization streams, a map between game objects and network ids, and
small vector math.

## Modules

- `gamenet.sockets`: `TCPSocket` and `UDPSocket`, the `create_tcp_socket` and
  `create_udp_socket` factories (taking a `SocketAddressFamily`, `INET` by default),
  and `select(read_set, write_set, except_set, timeout)`, which returns the ready
  sockets of each set in the order they were given. Failed operations are logged and
  raise `SocketError`, whose `operation` attribute names the call that failed. A
  non-blocking `UDPSocket.receive_from` with nothing waiting returns `(b"", None)`.
  Both socket types can be used as context managers and close on exit.
- `gamenet.address`: `SocketAddress`, an IPv4 address held as a 32-bit integer and a
  port, with `from_sockaddr`, `as_sockaddr` and a `"host:port"` string form; and
  `create_ipv4_from_string`, which resolves `"host:port"` (or `"host"`, giving port 0).
  Failures raise `SocketAddressError`.
- `gamenet.memorystream`: `OutputMemoryStream` and `InputMemoryStream`, little-endian
  byte-aligned serialization. Primitives are written with a `struct` format for a single
  value (`write_primitive("I", 7)`). `write_string` and `write_int_list` prefix a 64-bit
  count; `write_list(fmt, values)` prefixes a 32-bit count. `write_game_object` and
  `read_game_object` go through a `LinkingContext` given to the stream. Reading past the
  end raises `EOFError`.
- `gamenet.bitstream`: `OutputMemoryBitStream` and `InputMemoryBitStream`, which pack
  values least significant bit first: unsigned and signed integers of any width, bools as
  one bit, 32-bit floats, `Vector3`, strings (32-bit length plus UTF-8), and unit
  quaternions as three 16-bit fixed-point components plus a sign bit for `w`. Also
  `convert_to_fixed` and `convert_from_fixed`.
- `gamenet.linking`: `LinkingContext`, a two-way map between game objects (keyed by
  identity) and network ids; an unknown object has id 0, an unknown id gives `None`.
- `gamenet.robomath`: `Vector3` (with arithmetic operators, lengths and normalization),
  `Quaternion`, `dot`, `dot_2d`, `cross`, `lerp`, `get_random_float`,
  `get_random_vector`, `is_2d_vector_equal`, `to_degrees`, `get_required_bits`, and
  constant vectors such as `ZERO`, `UNIT_X` and colours like `RED`.
- `gamenet.byteswap`: `byte_swap2`, `byte_swap4`, `byte_swap8` for unsigned integers, and
  `byte_swap(value, fmt)` for a single `struct`-formatted primitive.

The package has no dependencies beyond the standard library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example: bit-packing a player state

    from gamenet.bitstream import OutputMemoryBitStream, InputMemoryBitStream
    from gamenet.robomath import Vector3

    out = OutputMemoryBitStream()
    out.write_uint(42, 7)
    out.write_bool(True)
    out.write_vector3(Vector3(1.0, 2.0, 3.0))
    out.write_string("player")

    stream = InputMemoryBitStream(out.getvalue())
    assert stream.read_uint(7) == 42
    assert stream.read_bool() is True
    position = stream.read_vector3()
    name = stream.read_string()

## Example: referring to game objects by network id

    from gamenet.linking import LinkingContext
    from gamenet.memorystream import InputMemoryStream, OutputMemoryStream

    context = LinkingContext()
    player = object()
    context.add_game_object(player, 7)

    out = OutputMemoryStream(context)
    out.write_game_object(player)

    stream = InputMemoryStream(out.getvalue(), linking_context=context)
    assert stream.read_game_object() is player

## Example: a UDP round trip

    from gamenet.address import create_ipv4_from_string
    from gamenet.sockets import SocketAddressFamily, create_udp_socket

    receiver = create_udp_socket(SocketAddressFamily.INET)
    receiver.bind(create_ipv4_from_string("127.0.0.1:48000"))

    sender = create_udp_socket(SocketAddressFamily.INET)
    sender.send_to(b"hello", create_ipv4_from_string("127.0.0.1:48000"))

    data, source = receiver.receive_from(1500)

    sender.close()
    receiver.close()

## What it does not do

This is a library only: there is no command-line program, game server or replication
loop. `SocketAddress` holds IPv4 addresses only, so although `SocketAddressFamily.INET6`
sockets can be created, there is no IPv6 address type to bind or connect them with.
`select` is meant for `TCPSocket` objects.