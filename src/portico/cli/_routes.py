"""``portico routes`` — list registered controllers and their actions."""

import argparse
import sys

from portico.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of CONTROLLER, PATH and ACTIONS for a portico app.

    Actions are read from ``Controller.actions``; plain factories show
    ``(dynamic)`` since their actions are only known per instance.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    registry = app.registry
    if not len(registry):
        print("No controllers registered.")
        return

    catch_all = app.config.catch_all
    rows: list[tuple[str, str, str]] = []
    for name in registry.names():
        factory = registry.get(name)
        actions = getattr(factory, "actions", None)
        if actions is None:
            actions_str = "(dynamic)"
        else:
            actions_str = ", ".join(
                f"{action}*" if action == catch_all else action for action in sorted(actions)
            )
        path = "/" + name[:1].lower() + name[1:]
        rows.append((name, path, actions_str))

    max_name = max(max(len(r[0]) for r in rows), 10)  # "CONTROLLER" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("CONTROLLER", "PATH", "ACTIONS"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, actions_str in rows:
        print(fmt.format(name, path, actions_str))
    print(f"\n* catch-all ({catch_all})")
