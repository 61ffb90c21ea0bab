import io

import pytest

from quantsims.twap import ChildOrder, ExecutionLog, TWAPStrategy, main


def test_execute_writes_equal_slices(tmp_path):
    path = tmp_path / "log.csv"
    with ExecutionLog(path, output=io.StringIO()) as log:
        orders = TWAPStrategy(log, 1000, 10, delay=0).execute()
    assert [o.id for o in orders] == list(range(1, 11))
    assert all(o.size == 100 and o.price == 100.0 for o in orders)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "order_id,price,size"
    assert lines[1] == "1,100,100"
    assert len(lines) == 11


def test_remainder_is_dropped(tmp_path):
    with ExecutionLog(tmp_path / "log.csv", output=io.StringIO()) as log:
        orders = TWAPStrategy(log, 1005, 10, delay=0).execute()
    assert sum(o.size for o in orders) <= 1005
    assert len({o.size for o in orders}) == 1
    assert orders[0].size == 1005 // 10


def test_execute_order_reports(tmp_path):
    out = io.StringIO()
    with ExecutionLog(tmp_path / "log.csv", output=out) as log:
        log.execute_order(ChildOrder(7, 101.5, 20))
    assert out.getvalue() == "Executed order: ID=7 Price=101.5 Size=20\n"
    assert (tmp_path / "log.csv").read_text(encoding="utf-8").splitlines()[1] == "7,101.5,20"


def test_zero_steps_rejected(tmp_path):
    with ExecutionLog(tmp_path / "log.csv", output=io.StringIO()) as log:
        with pytest.raises(ValueError):
            TWAPStrategy(log, 1000, 0)


def test_main(tmp_path, capsys):
    path = tmp_path / "exec.csv"
    assert main(["--delay", "0", "--output", str(path)]) == 0
    assert len(path.read_text(encoding="utf-8").splitlines()) == 11
    out = capsys.readouterr().out
    assert out.count("Executed order") == 10
    assert out.rstrip().endswith(f"Log saved to {path}")