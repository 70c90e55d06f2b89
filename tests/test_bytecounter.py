from primer.bytecounter import ByteCounter, main


def test_write_bytes():
    c = ByteCounter()
    assert c.write(b"hello") == 5
    assert c.count == 5


def test_print_into_counter():
    c = ByteCounter()
    print("hello, %s" % "Dolly", end="", file=c)
    assert int(c) == 12


def test_text_counts_utf8_bytes():
    c = ByteCounter()
    assert c.write("é") == 2


def test_counts_accumulate():
    c = ByteCounter()
    c.write(b"abc")
    c.write("defg")
    assert c.count == len(b"abc") + len(b"defg")


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["5", "12"]