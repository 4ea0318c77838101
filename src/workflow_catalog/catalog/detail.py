"""Per-workflow detail, download payload and diagram.

The structural definition is synthesized from the summary itself: a start node
followed by one node per integration, chained in order over the `main` output.
"""

from __future__ import annotations

import json
import re
import string

from workflow_catalog.catalog.models import (
    ConnectionTarget,
    WorkflowDefinition,
    WorkflowDetail,
    WorkflowNode,
    WorkflowSummary,
)
from workflow_catalog.catalog.store import WorkflowStore

START_NODE_NAME = "Start"
START_NODE_TYPE = "n8n-nodes-base.start"
NODE_TYPE_PREFIX = "n8n-nodes-base."

ORIGIN = (240, 300)
STEP_X = 220

START_STYLE = "fill:#b3e0ff,stroke:#0066cc"
END_STYLE = "fill:#ffb3b3,stroke:#cc0000"

_WORD = re.compile(r"[A-Za-z0-9]+")


def _node_type(integration: str) -> str:
    words = _WORD.findall(integration)
    if not words:
        return NODE_TYPE_PREFIX + "noOp"
    head, *rest = words
    return NODE_TYPE_PREFIX + head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in rest)


def _unique_name(name: str, taken: set[str]) -> str:
    # Same scheme the editor uses: "HTTP Request", "HTTP Request1", ...
    candidate = name
    suffix = 1
    while candidate in taken:
        candidate = f"{name}{suffix}"
        suffix += 1
    taken.add(candidate)
    return candidate


def build_definition(summary: WorkflowSummary) -> WorkflowDefinition:
    taken: set[str] = {START_NODE_NAME}
    nodes = [WorkflowNode(name=START_NODE_NAME, type=START_NODE_TYPE, position=ORIGIN)]
    for idx, integration in enumerate(summary.integrations, start=1):
        nodes.append(
            WorkflowNode(
                name=_unique_name(integration, taken),
                type=_node_type(integration),
                position=(ORIGIN[0] + idx * STEP_X, ORIGIN[1]),
            )
        )

    connections = {
        source.name: {"main": [[ConnectionTarget(node=target.name)]]}
        for source, target in zip(nodes, nodes[1:])
    }
    return WorkflowDefinition(
        name=summary.name,
        active=summary.active,
        nodes=nodes,
        connections=connections,
    )


def _diagram_id(index: int) -> str:
    letters = string.ascii_uppercase
    if index < len(letters):
        return letters[index]
    return f"N{index}"


def _label(name: str) -> str:
    # Quoted Mermaid label; `#quot;` is the entity Mermaid accepts inside quotes.
    return '"' + name.replace('"', "#quot;") + '"'


def _chain(definition: WorkflowDefinition) -> list[str]:
    if not definition.nodes:
        return []
    start = next(
        (n.name for n in definition.nodes if n.type == START_NODE_TYPE),
        definition.nodes[0].name,
    )
    chain = [start]
    seen = {start}
    current = start
    while True:
        outputs = definition.connections.get(current, {}).get("main", [])
        targets = [t.node for group in outputs for t in group]
        if not targets or targets[0] in seen:
            return chain
        current = targets[0]
        seen.add(current)
        chain.append(current)


def render_diagram(definition: WorkflowDefinition) -> str:
    """Render the definition as a top-down Mermaid flow chart.

    The chain is followed from the start node along the first `main` target of
    each node and closed with an `End` node. Start and end are styled.
    """

    labels = [*_chain(definition), "End"]
    ids = [_diagram_id(i) for i in range(len(labels))]

    lines = [f"{ids[0]}[{_label(labels[0])}] --> {ids[1]}[{_label(labels[1])}]"]
    for i in range(1, len(labels) - 1):
        lines.append(f"{ids[i]} --> {ids[i + 1]}[{_label(labels[i + 1])}]")
    lines.append(f"style {ids[0]} {START_STYLE}")
    lines.append(f"style {ids[-1]} {END_STYLE}")
    return "graph TD\n" + "\n".join("    " + line for line in lines)


class DetailResolver:
    """Resolve a filename to its detail, download payload or diagram.

    Every operation raises :class:`~workflow_catalog.catalog.store.WorkflowNotFound`
    for filenames absent from the store.
    """

    def __init__(self, store: WorkflowStore) -> None:
        self._store = store

    def get_detail(self, filename: str) -> WorkflowDetail:
        summary = self._store.get(filename)
        return WorkflowDetail(metadata=summary, raw_json=build_definition(summary))

    def get_download(self, filename: str) -> tuple[bytes, str]:
        summary = self._store.get(filename)
        payload = build_definition(summary).model_dump(mode="json")
        body = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
        return body.encode("utf-8"), summary.filename

    def get_diagram(self, filename: str) -> str:
        return render_diagram(build_definition(self._store.get(filename)))
