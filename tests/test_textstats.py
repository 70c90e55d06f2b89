import io

from primer.textstats import (
    count_chars,
    dedup,
    format_char_counts,
    main_charcount,
    main_dedup,
)


def test_dedup_keeps_first_occurrence():
    assert list(dedup(["a", "b", "a", "c", "b"])) == ["a", "b", "c"]


def test_dedup_output_is_unique():
    lines = ["x", "y", "x", "x", "z", "y"]
    out = list(dedup(lines))
    assert len(out) == len(set(out)) == len(set(lines))


def test_count_ascii():
    data = b"hello"
    result = count_chars(data)
    assert result.counts == {c: "hello".count(c) for c in "helo"}
    assert result.utflen[1] == len(data)
    assert result.invalid == 0


def test_lengths_cover_all_bytes():
    data = "héllo世界😀".encode("utf-8") + b"\xff\xc3"
    result = count_chars(data)
    total = sum(size * n for size, n in result.utflen.items())
    assert total + result.invalid == len(data)
    assert sum(result.counts.values()) == sum(result.utflen.values())


def test_invalid_byte():
    result = count_chars(b"a\xffb")
    assert result.invalid == 1
    assert result.counts == {"a": 1, "b": 1}


def test_encoded_replacement_char_is_valid():
    result = count_chars("\ufffd".encode("utf-8"))
    assert result.invalid == 0
    assert result.counts == {"\ufffd": 1}


def test_format_char_counts():
    text = format_char_counts(count_chars(b"a\xff"))
    assert text.startswith("rune\tcount\n")
    assert "'a'\t1\n" in text
    assert "\nlen\tcount\n" in text
    assert text.endswith("\n1 invalid UTF-8 characters\n")


def test_format_without_invalid_has_no_invalid_line():
    text = format_char_counts(count_chars(b"abc"))
    assert "invalid" not in text


def test_main_dedup(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("one\ntwo\none\r\nthree\n"))
    assert main_dedup([]) == 0
    assert capsys.readouterr().out == "one\ntwo\nthree\n"


def test_main_charcount(capsys, monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"zz"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main_charcount([]) == 0
    out = capsys.readouterr().out
    assert out == format_char_counts(count_chars(b"zz"))
    assert "'z'\t2\n" in out