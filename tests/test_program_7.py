from asteva.interpreter import parse_program, Interpreter


def test_program_7_fizzbuzz(capsys, load_program):
    source = load_program('program_7.asteva')
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip().split('\n')
    assert out[:5] == ['1', '2', 'Fizz', '4', 'Buzz']
    assert out[-1] == 'FizzBuzz'
    assert len(out) == 15
