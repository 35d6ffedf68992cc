#!/usr/bin/env python3
"""
DeVibe Docs CLI — Figma 組件 / token → AI 友善 markdown 文件

  python -m devibe_docs.cli generate extraction.json [--tool bolt] [--output DESIGN_SYSTEM.md]
  python -m devibe_docs.cli generate extraction.json --format tailwind
  python -m devibe_docs.cli fetch --file-key KEY [--output extraction.json]
  python -m devibe_docs.cli audit extraction.json
  python -m devibe_docs.cli guide bolt
  python -m devibe_docs.cli watch extraction.json
"""

import argparse
import os
import sys
import time

import requests
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import __version__
from .config import DEFAULT_CONFIG_PATH, _section, load_config
from .consistency import generate_consistency_report
from .design_assets import load_extraction, write_docs_manifest, write_extraction, write_markdown
from .document import generate_design_system_markdown
from .figma_reader import fetch_raw_components
from .generator import build_component_records, generate_enhanced_documentation
from .naming_engine import NAMING_PRESETS, generate_naming_guide, generate_semantic_mappings, resolve_preset
from .tailwind_config import generate_tailwind_config
from .utility_css import generate_utility_css

_TOOL_CHOICES = sorted(NAMING_PRESETS) + ["figma-make"]

OUTPUT_FORMATS = ("markdown", "tailwind", "css")

# format → 預設輸出檔名
_DEFAULT_OUTPUTS = {
    "markdown": "DESIGN_SYSTEM.md",
    "tailwind": "tailwind.config.js",
    "css": "design-system.css",
}


def _config_str(section: dict, key: str):
    value = section.get(key)
    return value if isinstance(value, str) and value else None


def _generate_options(args, config: dict) -> dict:
    """CLI 參數 > config > 預設值."""
    document_cfg = _section(config, "document")
    output_cfg = _section(config, "output")
    output_format = args.format or output_cfg.get("format") or "markdown"
    if output_format not in OUTPUT_FORMATS:
        output_format = "markdown"
    return {
        "tool": args.tool or _section(config, "naming").get("tool") or "bolt",
        "format": output_format,
        "output": args.output or _config_str(output_cfg, "path") or _DEFAULT_OUTPUTS[output_format],
        "title": args.title or _config_str(document_cfg, "title"),
        "components_only": args.components_only or document_cfg.get("includeTokens") is False,
        "manifest": args.manifest or bool(output_cfg.get("manifest")),
    }


def render_output(raw_components: list, tokens: list, file_name: str, options: dict) -> str:
    output_format = options["format"]
    if output_format == "tailwind":
        return generate_tailwind_config(tokens)
    if output_format == "css":
        return generate_utility_css(tokens)
    if options["components_only"]:
        return generate_enhanced_documentation(raw_components)
    return generate_design_system_markdown(
        raw_components,
        tokens,
        tool=options["tool"],
        title=options["title"] or file_name,
    )


def perform_generate(input_path: str, options: dict) -> bool:
    """Core generate logic, shared by generate and watch commands."""
    print(f"📄 Generating {options['format']} from: {input_path}")
    try:
        file_name, raw_components, tokens = load_extraction(input_path)
        content = render_output(raw_components, tokens, file_name, options)
    except (FileNotFoundError, ValueError) as e:
        print(f"   ❌ {e}")
        return False

    try:
        out_path = write_markdown(options["output"], content)
        print(f"   ✅ Saved {len(content)} characters to {out_path}")

        if options["manifest"]:
            records, _ = build_component_records(raw_components)
            score = generate_consistency_report(tokens).score if tokens else None
            output_dir = os.path.dirname(os.path.abspath(out_path))
            manifest_path = write_docs_manifest(
                output_dir,
                source=options["title"] or file_name,
                tool=options["tool"],
                records=records,
                token_count=len(tokens),
                consistency_score=score,
                extracted_count=len(raw_components),
                output_format=options["format"],
            )
            print(f"   📋 Manifest saved to {manifest_path}")
    except OSError as e:
        print(f"   ❌ 無法寫入輸出檔：{e}")
        return False
    return True


def cmd_generate(args, config: dict) -> int:
    options = _generate_options(args, config)
    return 0 if perform_generate(args.input, options) else 1


def cmd_fetch(args, config: dict) -> int:
    """Fetch: 從 Figma REST API 讀取組件並寫出 extraction JSON."""
    figma_cfg = _section(config, "figma")
    token = figma_cfg.get("personalAccessToken") or os.environ.get("FIGMA_TOKEN")
    file_key = args.file_key or figma_cfg.get("fileKey")

    if not token:
        print("❌ 請設定 FIGMA_TOKEN 環境變數，或在 devibe-docs.config.json 的 figma.personalAccessToken 設定。")
        print("   取得方式：Figma → Settings → Personal access tokens → 新增")
        return 1
    if not file_key:
        print("❌ 請使用 --file-key 或在 config 的 figma.fileKey 設定 Figma 檔案 key。")
        return 1

    print(f"📥 Fetching components from Figma: {file_key}")
    try:
        file_name, raw_components = fetch_raw_components(token, file_key)
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        if status == 403:
            print("❌ Figma API 403：Token 無效或已過期，請重新產生 FIGMA_TOKEN。")
        elif status == 404:
            print(f"❌ Figma API 404：找不到檔案 '{file_key}'，請確認 file key 是否正確。")
        else:
            print(f"❌ Figma API 錯誤：{e}")
        return 1
    except requests.RequestException as e:
        print(f"❌ 無法連線 Figma API：{e}")
        return 1

    out_path = write_extraction(args.output or "extraction.json", file_name, raw_components)
    print(f"   ✅ {len(raw_components)} components saved to {out_path}")
    return 0


def cmd_audit(args, config: dict) -> int:
    """Audit: 列出語意對應與命名一致性報告."""
    try:
        _, _, tokens = load_extraction(args.input)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return 1
    if not tokens:
        print("   ℹ️  沒有 token 可分析。")
        return 0

    print("\n🔤 Semantic mappings:")
    for m in generate_semantic_mappings(tokens):
        print(f"   {m.original_name} → {m.semantic_name}  ({m.confidence:.0%}, {m.reasoning})")

    report = generate_consistency_report(tokens)
    print(f"\n✅ Consistency score: {report.score:.0%}")
    for issue in report.issues:
        print(f"   ⚠️  {issue}")
    for rec in report.recommendations:
        print(f"   💡 {rec}")
    return 0


def cmd_guide(args, config: dict) -> int:
    key, pattern = resolve_preset(args.tool)
    print(generate_naming_guide(key, pattern))
    return 0


_WATCHED_EXTENSIONS = (".json",)


class ChangeHandler(FileSystemEventHandler):
    """檔案變更事件處理器，帶 debounce 防抖。"""

    def __init__(self, callback, debounce: float = 1.0, ignore_paths=()):
        self.callback = callback
        self.last_trigger = 0.0
        self.debounce_seconds = debounce
        self.ignore_paths = {os.path.abspath(p) for p in ignore_paths}

    def on_modified(self, event):
        if event.is_directory:
            return
        if not event.src_path.endswith(_WATCHED_EXTENSIONS):
            return
        if os.path.abspath(event.src_path) in self.ignore_paths:
            return
        current_time = time.time()
        if current_time - self.last_trigger < self.debounce_seconds:
            return
        self.last_trigger = current_time
        print(f"\n🔄 File changed: {event.src_path}")
        try:
            self.callback()
        except Exception as e:
            # observer 執行緒上的例外會讓 watch 停止運作
            print(f"   ❌ 重新產生失敗：{e}")


def cmd_watch(args, config: dict) -> int:
    """Watch: 監聽 extraction JSON 變更並自動重新產生文件."""
    options = _generate_options(args, config)
    watch_dir = os.path.dirname(os.path.abspath(args.input))
    print(f"👀 Watching for changes in '{watch_dir}'...")
    print("   Press Ctrl+C to stop.")

    perform_generate(args.input, options)

    handler = ChangeHandler(
        lambda: perform_generate(args.input, options),
        ignore_paths=[os.path.join(os.path.dirname(os.path.abspath(options["output"])), "docs-manifest.json")],
    )
    observer = Observer()
    observer.schedule(handler, path=watch_dir, recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n👋 Stopping watch...")
        observer.stop()
    finally:
        observer.join()
    return 0


def _add_generate_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("input", help="Extraction JSON (plugin export or `fetch` output)")
    p.add_argument("--tool", choices=_TOOL_CHOICES, help="AI tool naming preset (default: bolt)")
    p.add_argument("--output", "-o", help="Output path (default: DESIGN_SYSTEM.md, tailwind.config.js or design-system.css)")
    p.add_argument("--format", "-f", choices=OUTPUT_FORMATS, help="Output format (default: markdown)")
    p.add_argument("--title", help="Document title (default: Figma file name)")
    p.add_argument("--components-only", action="store_true", help="Only emit the component library")
    p.add_argument("--manifest", action="store_true", help="Write docs-manifest.json next to the output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devibe-docs",
        description="DeVibe Docs: Figma components & tokens → AI-friendly markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config path")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    gen_p = sub.add_parser("generate", help="Extraction JSON → markdown",
        epilog="Examples:\n  devibe-docs generate extraction.json\n  devibe-docs generate extraction.json --tool cursor -o docs/DESIGN.md\n  devibe-docs generate extraction.json --format css -o styles/design-system.css",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    _add_generate_arguments(gen_p)

    fetch_p = sub.add_parser("fetch", help="Figma file → extraction JSON",
        epilog="Examples:\n  devibe-docs fetch --file-key ABC123\n  devibe-docs fetch --file-key ABC123 --output design/extraction.json",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    fetch_p.add_argument("--file-key", help="Figma file key")
    fetch_p.add_argument("--output", "-o", help="Output path (default: extraction.json)")

    audit_p = sub.add_parser("audit", help="Token naming consistency report")
    audit_p.add_argument("input", help="Extraction JSON")

    guide_p = sub.add_parser("guide", help="Print the naming guide for an AI tool")
    guide_p.add_argument("tool", choices=_TOOL_CHOICES)

    watch_p = sub.add_parser("watch", help="Regenerate markdown when the extraction changes")
    _add_generate_arguments(watch_p)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.command == "generate":
        return cmd_generate(args, config)
    if args.command == "fetch":
        return cmd_fetch(args, config)
    if args.command == "audit":
        return cmd_audit(args, config)
    if args.command == "guide":
        return cmd_guide(args, config)
    if args.command == "watch":
        return cmd_watch(args, config)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
