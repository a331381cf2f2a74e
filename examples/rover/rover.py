"""
A rover is deployed on a 10x10 zone with a couple of pits.

An example of the rover program (see `program.rbt`):
   DEPLOY 0,0,NORTH
   PIT 1,1
   PIT 2,2
   MOVE
   RIGHT
   MOVE
   REPORT

"""
import os
from rovsim import Interpreter


def main(debug=False):
    this_folder = os.path.dirname(__file__)
    interpreter = Interpreter(debug=debug, debug_colors=debug)

    outputs = interpreter.process_file(os.path.join(this_folder,
                                                    'program.rbt'))

    for output in outputs:
        print(output)
    print("Rover stops at: {}".format(interpreter.report()))
    return outputs


if __name__ == "__main__":
    main(debug=False)
