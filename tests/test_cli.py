import struct

from tagalloc.cli import main


def test_main_returns_zero(capsys):
    assert main() == 0
    capsys.readouterr()


def test_main_reports_three_allocations(capsys):
    main([])
    out = capsys.readouterr().out
    assert "Number of allocations:\t3" in out
    total = 100 + struct.calcsize("i") * 50 + struct.calcsize("d") * 20
    assert f"Size of allocations:\t{total}B" in out


def test_main_tags_in_newest_first_order(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    tags = [line.split("\t", 1)[1] for line in lines if line.startswith("Tag of")]
    assert tags == ["values", "numbers", "name"]


def test_main_block_sizes(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    sizes = [
        int(line.split("\t", 1)[1])
        for line in lines
        if line.startswith("Size of block memory:")
    ]
    assert sizes == [struct.calcsize("d") * 20, struct.calcsize("i") * 50, 100]