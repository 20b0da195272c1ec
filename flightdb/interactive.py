"""Prompting the user for one of a fixed set of answers."""

import sys


def get_user_answer(initial_message, answers, invalid_message, stdin=None, stdout=None):
    """Read lines until one equals an answer; return that answer's position.

    The initial message, if any, is written once. The invalid message is
    written after every non-empty line that matches no answer; empty lines are
    silently read again. Raises EOFError if input ends first.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    answers = list(answers)
    if initial_message:
        stdout.write(initial_message)
        stdout.flush()
    response = ""
    while response not in answers:
        if response:
            stdout.write(invalid_message)
            stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before a valid answer was given")
        response = line.split("\n", 1)[0]
    return answers.index(response)