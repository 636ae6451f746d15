from asteva.interpreter import parse_program, Interpreter


def test_program_9_boolean_loop(capsys, load_program):
    source = load_program('program_9.asteva')
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == 'true\n3\ntrue'
