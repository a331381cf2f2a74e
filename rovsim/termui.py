import click

colors = False

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}
S_EMPH = {'fg': 'yellow'}


def prints(message):
    click.echo(message, color=colors)


def style_message(message, style):
    if colors:
        return click.style(message, **style)
    else:
        return message


def s_header(message):
    return style_message(message, S_HEADER)


def s_attention(message):
    return style_message(message, S_ATTENTION)


def style(header, content, level=0, new_line=False, header_style=S_HEADER):
    new_line = "\n" if new_line else ""
    level = ("\t" * level) if level else ""
    return new_line + level + style_message(str(header), header_style) \
        + ((" " + str(content)) if content else "")


def styled_print(header, content, level=0, new_line=False,
                 header_style=S_HEADER):
    prints(style(header, content, level, new_line, header_style))


def h_print(header, content="", level=0, new_line=False):
    styled_print(header, content, level, new_line, S_HEADER)


def a_print(header, content="", level=0, new_line=False):
    styled_print(header, content, level, new_line, S_ATTENTION)


def e_print(header, content="", level=0, new_line=False):
    styled_print(header, content, level, new_line, S_EMPH)
