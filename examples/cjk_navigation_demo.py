#!/usr/bin/env python3
"""
CJK word navigation demonstration.

This example shows how pybamboo segments mixed CJK/Latin lines and how the
editor commands move the cursor, extend the selection and delete by word.

The active segmenter depends on the environment:
1. With PyICU installed, ICU word break iterators (zh/ja/ko) are used
2. Without it, the rule-based fallback groups CJK runs, words, spaces and
   punctuation

Usage:
    python examples/cjk_navigation_demo.py

Output:
    Segments of each sample line, cursor stops and an edit walkthrough
"""

import logging

from pybamboo import BambooPlugin, BoundaryEngine, TextDocument
from pybamboo.editor import EditorSelection, EditorState, SimpleView

SAMPLE_LINES = [
    "hello世界test",
    "你好，世界！",
    "東京タワー行きのバスに乗る",
    "안녕하세요 세상",
]


def show_segments(plugin: BambooPlugin) -> None:
    print("=" * 60)
    print(f"Segmenter: {plugin.service.segmenter.name}")
    print("=" * 60)
    for line in SAMPLE_LINES:
        segments = plugin.service.segments_for(line)
        rendered = " | ".join(
            f"{seg.text}{'' if seg.is_word_like else '*'}" for seg in segments
        )
        print(f"{line}\n  -> {rendered}")
    print("(* = not word-like)\n")


def show_cursor_stops(plugin: BambooPlugin) -> None:
    engine = BoundaryEngine(plugin.service)
    doc = TextDocument("\n".join(SAMPLE_LINES))
    stops = [0]
    while stops[-1] < doc.length:
        stops.append(engine.next_boundary(doc, stops[-1], 1))
    print(f"Forward cursor stops: {stops}\n")


def show_editing(plugin: BambooPlugin) -> None:
    move_right = plugin.extension.binding_for("Ctrl-ArrowRight", "linux")
    backspace = plugin.extension.binding_for("Ctrl-Backspace", "linux")

    view = SimpleView(EditorState.create("hello世界test", EditorSelection.single(5)))
    move_right.run(view)
    print(f"Ctrl-Right from 5 -> {view.state.selection.main.head}")
    backspace.run(view)
    print(f"Ctrl-Backspace     -> {view.state.doc.text!r}")

    view = SimpleView(EditorState.create("hello world", EditorSelection.single(5)))
    handled = move_right.run(view)
    print(f"Ctrl-Right on Latin text handled: {handled} (host default applies)")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    with BambooPlugin() as plugin:
        plugin.load()
        show_segments(plugin)
        show_cursor_stops(plugin)
        show_editing(plugin)


if __name__ == "__main__":
    main()
