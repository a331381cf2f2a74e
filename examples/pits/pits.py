"""
Commands can be fed line by line to a long running interpreter. Here a small
5x5 zone is walled off with pits and the rover is driven around it.

Custom output messages are used.
"""
from rovsim import Interpreter, Messages


def build_commands(size):
    yield "DEPLOY 0,0,EAST"
    # Pits along the diagonal, starting right after the DEPLOY.
    for i in range(1, size):
        yield "PIT {},{}".format(i, i)
    for _ in range(size):
        yield "MOVE"
    yield "LEFT"
    for _ in range(size):
        yield "MOVE"
    yield "REPORT"


def main(debug=False):
    messages = Messages(outside_zone="Wall", pit_detected="Pit",
                        robot_detected="Robot", report="at {x}/{y} {direction}")
    interpreter = Interpreter(board_size=5, messages=messages, debug=debug)

    outputs = []
    for line in build_commands(5):
        output = interpreter.execute(line)
        if output is not None:
            print(output)
            outputs.append(output)
    print("Pits: {}".format(sorted(interpreter.pits)))
    return outputs


if __name__ == "__main__":
    main(debug=False)
