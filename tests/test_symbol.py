from stacknt.types.symbol import Symbol


def test_equal_names_are_equal_symbols():
    assert Symbol("let") == Symbol("l" + "et")
    assert hash(Symbol("let")) == hash(Symbol("let"))
    assert Symbol("let") != Symbol("defun")


def test_symbol_is_not_its_text():
    assert Symbol("x") != "x"
    assert "x" != Symbol("x")


def test_symbol_destructures_to_name():
    match Symbol("if-else"):
        case Symbol(name):
            assert name == "if-else"


def test_rendering():
    assert str(Symbol("new-line")) == "new-line"
    assert repr(Symbol("tab")) == "Symbol('tab')"
