from lambdautils.app.main import main, parity


def test_parity():
    assert parity(2) == "even"
    assert parity(7) == "odd"


def test_main_groups_and_prints(capsys):
    groups = main()
    assert groups == {"odd": {1, 3, 5}, "even": {2, 4}}

    # Drop any log records the handler wrote to the captured stream
    lines = [
        line
        for line in capsys.readouterr().out.splitlines()
        if " - lambdautils - " not in line
    ]
    assert lines == ["even", "\t2", "\t4", "odd", "\t1", "\t3", "\t5"]
