import pytest

from quantsims.ofi import OfiRecord, QuoteEvent, TopOfBook, compute_ofi, load_events, main


def test_mid_price_needs_both_sides():
    book = TopOfBook()
    book.apply(QuoteEvent(1, "update", 99.0, 10, "bid"))
    assert book.mid_price() == 0.0
    book.apply(QuoteEvent(2, "update", 101.0, 5, "ask"))
    assert book.mid_price() == 100.0
    assert (book.bid_size, book.ask_size) == (10, 5)


def test_unknown_side_leaves_book_unchanged():
    book = TopOfBook()
    book.apply(QuoteEvent(1, "update", 99.0, 10, "mid"))
    assert book == TopOfBook()


def test_compute_ofi_sequence():
    events = [
        QuoteEvent(1, "update", 99.0, 10, "bid"),
        QuoteEvent(2, "update", 99.0, 15, "bid"),
        QuoteEvent(3, "update", 101.0, 7, "ask"),
        QuoteEvent(4, "update", 98.0, 4, "bid"),
    ]
    records = list(compute_ofi(events))
    assert [r.timestamp for r in records] == [1, 2, 3, 4]
    assert records[0].ofi == 10
    assert records[1].ofi == 15 - 10
    assert records[2].ofi == -7
    assert records[3].ofi == 4
    assert records[0].mid_price == 0.0
    assert records[3].mid_price == pytest.approx((98.0 + 101.0) / 2)


def test_same_price_size_drop_is_negative():
    events = [
        QuoteEvent(1, "update", 101.0, 8, "ask"),
        QuoteEvent(2, "update", 101.0, 3, "ask"),
    ]
    records = list(compute_ofi(events))
    assert records[1] == OfiRecord(2, -(3 - 8), 0.0)


def test_load_events_round_trip(tmp_path):
    path = tmp_path / "ofi.csv"
    path.write_text("timestamp,type,price,size,side\n1,update,99.5,10,bid\n2,update,100.5,3,ask\n")
    assert load_events(path) == [
        QuoteEvent(1, "update", 99.5, 10, "bid"),
        QuoteEvent(2, "update", 100.5, 3, "ask"),
    ]


def test_load_events_malformed(tmp_path):
    path = tmp_path / "ofi.csv"
    path.write_text("timestamp,type,price,size,side\n1,update,abc,10,bid\n")
    with pytest.raises(ValueError):
        load_events(path)


def test_load_events_too_few_fields(tmp_path):
    path = tmp_path / "ofi.csv"
    path.write_text("header\n1,update,99\n")
    with pytest.raises(ValueError):
        load_events(path)


def test_main_writes_csv(tmp_path, capsys):
    src = tmp_path / "ofi.csv"
    src.write_text("timestamp,type,price,size,side\n1,update,99,10,bid\n2,update,101,5,ask\n")
    out = tmp_path / "out.csv"
    assert main([str(src), "--output", str(out)]) == 0
    lines = out.read_text().splitlines()
    assert lines[0] == "timestamp,OFI,MidPrice"
    assert lines[1] == "1,10,0"
    assert len(lines) == 3
    assert "t=2 | OFI=-5" in capsys.readouterr().out