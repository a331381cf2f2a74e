#!/usr/bin/env python
import sys
import click
from rovsim import Interpreter, LineTokenizer, InputReadError, \
    InterpreterInitError, CommandSyntaxError, Location
from rovsim.board import DEFAULT_BOARD_SIZE
from rovsim.termui import prints, a_print, h_print
import rovsim.termui as t


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.option('--board-size', default=DEFAULT_BOARD_SIZE, type=int,
              show_default=True, help="Side length of the square zone.")
@click.pass_context
def rovsim(ctx, debug, no_colors, board_size):
    """
    Command line interface for the rover robot simulator.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors,
               'board_size': board_size}


@rovsim.command()
@click.option('--input-file', '-f', type=click.Path(),
              help="File with commands")
@click.option('--input', '-i', help="Commands string, one command per line")
@click.pass_context
def run(ctx, input_file, input):
    """
    Interpret commands and print the report lines. Reads standard input if
    neither input file nor input string is given.
    """
    colors = ctx.obj['colors']
    debug = ctx.obj['debug']
    try:
        interpreter = Interpreter(board_size=ctx.obj['board_size'],
                                  debug=debug,
                                  debug_colors=colors and debug)
    except InterpreterInitError as e:
        prints(str(e))
        sys.exit(1)

    try:
        if input_file:
            outputs = interpreter.iter_process_file(input_file)
        elif input is not None:
            outputs = interpreter.iter_process(split_input(input))
        else:
            outputs = interpreter.iter_process(click.get_text_stream('stdin'),
                                               file_name='<stdin>')
        for output in outputs:
            click.echo(output)
    except InputReadError as e:
        t.colors = colors
        a_print("Error reading commands.")
        prints(str(e))
        sys.exit(1)


@rovsim.command()
@click.option('--input-file', '-f', type=click.Path(),
              help="File with commands")
@click.option('--input', '-i', help="Commands string, one command per line")
@click.pass_context
def check(ctx, input_file, input):
    """
    Check that every line is a well formed command. Reads standard input if
    neither input file nor input string is given.
    """
    t.colors = ctx.obj['colors']
    tokenizer = LineTokenizer()
    if input_file:
        try:
            with open(input_file, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            a_print("Error reading commands.")
            prints(str(InputReadError(Location(file_name=input_file), e)))
            sys.exit(1)
    elif input is not None:
        lines = split_input(input)
    else:
        lines = click.get_text_stream('stdin').read().splitlines()
        input_file = '<stdin>'

    errors = []
    for line_no, line in enumerate(lines, start=1):
        location = Location(line_no, line, input_file)
        try:
            tokenizer.tokenize(line, location)
        except CommandSyntaxError as e:
            errors.append(e)

    if not errors:
        h_print("Commands OK.")
        return

    if len(errors) == 1:
        message = 'There is 1 malformed line.'
    else:
        message = f'There are {len(errors)} malformed lines.'
    a_print(message)
    for error in errors:
        prints(str(error))
    sys.exit(1)


def split_input(input):
    """
    Splits an inline commands string into lines. Literal `\\n` sequences are
    accepted as line separators too.
    """
    return input.replace('\\n', '\n').splitlines()


if __name__ == '__main__':
    rovsim()
