"""
CLI entry point for inspecting the flattened public finance hierarchy.

Usage:
    python -m scripts.inspect_hierarchy
    python -m scripts.inspect_hierarchy --color-policy depth --wrap-width 30
    python -m scripts.inspect_hierarchy --json hierarchy.json --html sunburst.html
"""

import argparse
import json
import logging

logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    level=logging.INFO,
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Flatten the public finance taxonomy and print a summary"
    )
    parser.add_argument(
        "--wrap-width",
        type=int,
        default=25,
        help="Maximum characters per label line (default: 25)",
    )
    parser.add_argument(
        "--color-policy",
        choices=["group", "depth"],
        default="group",
        help="Color policy to apply (default: group)",
    )
    parser.add_argument(
        "--identity",
        choices=["path", "label"],
        default="path",
        help="How node identity is derived (default: path)",
    )
    parser.add_argument(
        "--json",
        default=None,
        help="Optional output file for the flattened arrays and index",
    )
    parser.add_argument(
        "--html",
        default=None,
        help="Optional output file for a standalone sunburst page",
    )
    args = parser.parse_args(argv)

    # Lazy imports so --help is fast
    from pfsunburst.data import PUBLIC_FINANCE_CHALLENGES
    from pfsunburst.hierarchy.colors import color_policy_from_name
    from pfsunburst.hierarchy.flattener import FlattenerConfig, TreeFlattener
    from pfsunburst.render import SunburstRenderer

    config = FlattenerConfig(
        wrap_width=args.wrap_width,
        color_policy=color_policy_from_name(args.color_policy),
        identity=args.identity,
    )
    hierarchy = TreeFlattener(config).flatten(PUBLIC_FINANCE_CHALLENGES)

    print("\n" + "=" * 60)
    print("FLATTENED HIERARCHY")
    print("=" * 60)
    for node_id in hierarchy.ids:
        node = hierarchy.index[node_id]
        label = node.label if len(node.label) <= 60 else node.label[:57] + "..."
        print(
            f"{'  ' * node.depth}{node.id:<8} value={node.value:<3} "
            f"{node.color:<8} {label}"
        )
    root = hierarchy.get_node(hierarchy.root_id)
    print(f"\n{len(hierarchy)} nodes, {root.value} statements")

    if args.json:
        with open(args.json, "w") as f:
            json.dump(hierarchy.to_dict(), f, indent=2)
        print(f"Hierarchy written to {args.json}")

    if args.html:
        SunburstRenderer().build_figure(hierarchy).write_html(args.html)
        print(f"Sunburst written to {args.html}")


if __name__ == "__main__":
    main()
