from asteva.interpreter import parse_program, Interpreter


def test_program_4_if_else(capsys, load_program):
    source = load_program('program_4.asteva')
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '1'
