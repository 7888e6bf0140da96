#!/usr/bin/env python3
"""
skirunrater CLI entry point
Positional commands over the ski run data file.
"""
import logging
import sys

from pydantic import ValidationError

from skirunrater import config
from skirunrater.models import SkiRun
from skirunrater.storage import (
    RunFileFormatError,
    SkiRunRepository,
    create_empty,
)
from skirunrater.summary import print_run_table, summarize_runs

USAGE = """Usage: skirunrater <command> [args] [--verbose]

Commands:
  init                         create an empty data file
  list                         show every run
  show ID                      show one run
  add ID NAME VERTICAL         add a run
  update ID NAME VERTICAL      replace the run(s) with ID
  delete ID                    delete the run(s) with ID
  query MIN MAX                runs with MIN <= vertical <= MAX
  summary                      vertical statistics"""

# command -> number of positional arguments
ARITY = {
    'init': 0, 'list': 0, 'summary': 0,
    'show': 1, 'delete': 1,
    'query': 2,
    'add': 3, 'update': 3,
}

# ---------------- Helper functions -----------------

def usage_exit():
    print(USAGE)
    sys.exit(1)


def parse_int(value, what):
    try:
        return int(value)
    except ValueError:
        print(f"ERROR: {what} must be an integer, got {value!r}")
        sys.exit(1)


def build_run(args):
    run_id = parse_int(args[0], 'ID')
    vertical = parse_int(args[2], 'VERTICAL')
    try:
        return SkiRun(id=run_id, name=args[1], vertical=vertical)
    except ValidationError as e:
        print(f"ERROR: invalid run: {e}")
        sys.exit(1)


def configure_logging(verbose):
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def open_repository(path):
    try:
        return SkiRunRepository(path)
    except FileNotFoundError:
        print(f"✘ no data file at {path}; run 'skirunrater init' first")
        sys.exit(1)
    except RunFileFormatError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

# ---------------- Main -----------------

def main():
    verbose = '--verbose' in sys.argv
    args = [a for a in sys.argv[1:] if a != '--verbose']
    if not args:
        usage_exit()

    action = args[0].lower()
    params = args[1:]
    if action not in ARITY or len(params) != ARITY[action]:
        usage_exit()

    configure_logging(verbose)
    path = config.data_file()

    if action == 'init':
        if path.exists():
            print(f"✘ data file already exists: {path}")
            sys.exit(1)
        create_empty(path)
        print(f"✔ created {path}")
        return

    with open_repository(path) as repo:
        if action == 'list':
            print_run_table(repo.get_all())
            return

        if action == 'summary':
            summarize_runs(repo.get_all())
            return

        if action == 'show':
            run_id = parse_int(params[0], 'ID')
            run = repo.get_by_id(run_id)
            if run is None:
                print(f"✘ no run found with id={run_id}")
                return
            print_run_table([run])
            return

        if action == 'query':
            lo = parse_int(params[0], 'MIN')
            hi = parse_int(params[1], 'MAX')
            print_run_table(repo.query_by_vertical(lo, hi))
            return

        if action == 'add':
            run = build_run(params)
            if repo.get_by_id(run.id) is not None:
                print(f"WARNING: id={run.id} already exists; adding a duplicate")
            repo.insert(run)
            print(f"✔ added run: {run.name} (id={run.id})")
            return

        if action == 'update':
            run = build_run(params)
            if repo.get_by_id(run.id) is None:
                print(f"WARNING: no run with id={run.id}; it will be added")
            repo.update(run)
            print(f"✔ updated run: {run.name} (id={run.id})")
            return

        if action == 'delete':
            run_id = parse_int(params[0], 'ID')
            if repo.get_by_id(run_id) is None:
                print(f"✘ no run found with id={run_id}")
                return
            repo.delete_by_id(run_id)
            print(f"✔ deleted run(s) with id={run_id}")
            return


if __name__ == '__main__':
    main()
