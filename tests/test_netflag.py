from primer.netflag import Flags, is_cast, is_up, main, set_broadcast, turn_down


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "10001 true",
        "10000 false",
        "10010 false",
        "10010 true",
    ]


def test_is_up():
    assert is_up(Flags.UP | Flags.MULTICAST) is True
    assert is_up(Flags.MULTICAST) is False


def test_turn_down_keeps_other_flags():
    v = turn_down(Flags.UP | Flags.MULTICAST)
    assert not is_up(v)
    assert v & Flags.MULTICAST == Flags.MULTICAST


def test_turn_down_is_idempotent():
    v = turn_down(Flags.LOOPBACK)
    assert v == Flags.LOOPBACK


def test_set_broadcast_makes_cast():
    v = Flags.LOOPBACK
    assert not is_cast(v)
    v = set_broadcast(v)
    assert is_cast(v)
    assert v & Flags.LOOPBACK == Flags.LOOPBACK


def test_multicast_is_cast():
    assert is_cast(Flags.MULTICAST) is True