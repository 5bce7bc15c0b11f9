#!/usr/bin/env python3
"""Example: Quickstart — canvas-command

Minimal working example: classify chat commands, apply them to an
in-memory canvas, and print the chat acknowledgments.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install canvas-command
"""
from __future__ import annotations

import canvascmd
from canvascmd.document import LayerDocument

LAYERS = [
    {"id": "title", "type": "text", "fill": "#000000", "fontSize": 32},
    {"id": "subtitle", "type": "text", "fill": "#333333", "fontSize": 18},
    {"id": "photo", "type": "image", "width": 400, "height": 300},
]

COMMANDS = [
    "把文字改成紅色",
    "放大選中的圖片",
    "刪除所有文字",
    "生成一張日落海灘的圖片",
    "hello",
]


def main() -> None:
    print(f"canvas-command version: {canvascmd.__version__}")

    document = LayerDocument(LAYERS, selected="photo")

    for command in COMMANDS:
        # Step 1: Classify the chat command
        action = canvascmd.classify(command)
        print(f"\n> {command}")
        print(f"  intent={action.intent.value} target={action.target.value} params={dict(action.params)}")

        # Step 2: Explain which keywords decided it
        classification = canvascmd.explain(command)
        if classification.is_ambiguous:
            print(f"  ambiguous: {classification.conflicts}")

        # Step 3: Apply it to the document
        outcome = canvascmd.execute(action, document.layers, document.selected, document.mutate)
        print(f"  outcome: {outcome}")

        # Step 4: Draft the chat reply
        print(f"  reply: {canvascmd.respond(action)}")

    print("\nFinal layers:")
    for layer in document.layers:
        print(f"  {layer.id:<10} {layer.kind:<6} {dict(layer.attrs)}")


if __name__ == "__main__":
    main()
