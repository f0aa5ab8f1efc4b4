"""CLI entrypoints for ruledocs commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import ConfigError, RuleDocsConfig, load_config
from .llm.transport import LLMRequestError
from .logging import configure_logging
from .models import ConfigEmoji, RuleInfo
from .orchestrator import Orchestrator
from .prompting.builder import RuleDocPromptBuilder
from .prompting.constants import SEVERITY_ORDER
from .rule_docs import RuleDocEnhancer


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        metavar="PATH",
        help="Also write a timestamped debug log to PATH.",
    )


def _add_ai_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--ai-provider",
        default=None,
        help="Hosted AI provider id (anthropic, groq, openai, openrouter, together, vercelaigateway, xai).",
    )
    parser.add_argument(
        "--ai-model",
        default=None,
        help="Override the provider's default model.",
    )


def _add_emoji_command(subparsers, name: str, help_text: str) -> None:
    command = subparsers.add_parser(name, help=help_text)
    _add_verbose_option(command, suppress_default=True)
    _add_log_file_option(command, suppress_default=True)
    command.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the plugin root holding .ruledocs.yml (defaults to current directory).",
    )
    command.add_argument(
        "--config",
        dest="configs",
        action="append",
        default=[],
        metavar="NAME",
        help="Config name to suggest an emoji for. Repeat for each config.",
    )
    command.add_argument(
        "--pin",
        dest="pins",
        action="append",
        default=[],
        metavar="NAME[=EMOJI]",
        help="Keep NAME at EMOJI, or request a generated emoji when EMOJI is omitted.",
    )
    command.add_argument(
        "--ai",
        action="store_true",
        help="Refine generated emojis with a hosted AI provider.",
    )
    _add_ai_options(command)
    command.add_argument(
        "--lenient-ai",
        action="store_true",
        help="Fall back to local suggestions when the AI request fails.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ruledocs",
        description="Suggest config emojis and improve rule docs for ESLint plugins.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_emoji_command(
        subparsers,
        "suggest-emojis",
        "Print a table of suggested emojis for each config.",
    )
    _add_emoji_command(
        subparsers,
        "init-emojis",
        "Print a configEmoji option value covering every config.",
    )

    enhance_parser = subparsers.add_parser(
        "enhance-rule-doc",
        help="Rewrite the body of a rule doc with a hosted AI provider.",
    )
    _add_verbose_option(enhance_parser, suppress_default=True)
    _add_log_file_option(enhance_parser, suppress_default=True)
    enhance_parser.add_argument("doc", help="Path to the rule's markdown doc.")
    enhance_parser.add_argument("--rule", required=True, help="Rule name, without the plugin prefix.")
    enhance_parser.add_argument("--plugin-prefix", default="", help="Plugin prefix used in rule ids.")
    enhance_parser.add_argument("--description", default=None, help="Rule description from its metadata.")
    enhance_parser.add_argument("--type", dest="rule_type", default=None, help="Rule type from its metadata.")
    enhance_parser.add_argument(
        "--fixable",
        default=None,
        choices=["code", "whitespace"],
        help="Autofix kind from the rule metadata.",
    )
    enhance_parser.add_argument(
        "--has-suggestions",
        action="store_true",
        help="Mark the rule as providing editor suggestions.",
    )
    enhance_parser.add_argument("--source", default=None, help="Path to the rule implementation.")
    enhance_parser.add_argument(
        "--severity",
        dest="severities",
        action="append",
        default=[],
        metavar="SEVERITY=CONFIG[,CONFIG]",
        help="Configs enabling the rule at SEVERITY (error, warn, off). Repeat per severity.",
    )
    enhance_parser.add_argument(
        "--options-file",
        default=None,
        metavar="PATH",
        help="JSON file holding the rule's options schema.",
    )
    enhance_parser.add_argument(
        "--templates-dir",
        default=None,
        help="Directory with a rule_doc.j2 overriding the built-in prompt template.",
    )
    enhance_parser.add_argument(
        "--project-root",
        default=".",
        help="Directory holding .ruledocs.yml (defaults to current directory).",
    )
    _add_ai_options(enhance_parser)
    enhance_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rewritten doc instead of writing it.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ruledocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command in {"suggest-emojis", "init-emojis"}:
        try:
            output = _run_emoji_command(args)
        except (ConfigError, LLMRequestError) as exc:
            parser.exit(1, f"{exc}\n")
        print(output)
    elif args.command == "enhance-rule-doc":
        try:
            result = _run_enhance_rule_doc(args)
        except (ConfigError, LLMRequestError, OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"{exc}\n")
        if result is not None:
            sys.stdout.write(result)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_emoji_command(args: argparse.Namespace) -> str:
    config = load_config(Path(args.path))
    config_names = list(args.configs) or list(config.configs)
    pins = [_parse_pin(value) for value in args.pins] or list(config.config_emoji)
    # Pinned names belong to the plugin even when not listed explicitly.
    for pin in pins:
        if pin.config not in config_names:
            config_names.append(pin.config)

    orchestrator = _orchestrator_for(config)
    options = {
        "ai": bool(args.ai) or config.ai.enabled,
        "ai_provider": args.ai_provider or config.ai.provider,
        "ai_model": args.ai_model or config.ai.model,
        "strict": config.ai.strict and not args.lenient_ai,
    }
    if args.command == "suggest-emojis":
        return orchestrator.run_suggest_emojis(config_names, config_emoji=pins, **options)
    return orchestrator.run_init_emojis(config_names, config_emoji=pins, **options)


def _run_enhance_rule_doc(args: argparse.Namespace) -> Optional[str]:
    config = load_config(Path(args.project_root))
    doc_path = Path(args.doc)
    doc_contents = doc_path.read_bytes().decode("utf-8")
    end_of_line = "\r\n" if "\r\n" in doc_contents else "\n"

    rule = RuleInfo(
        name=args.rule,
        plugin_prefix=args.plugin_prefix,
        description=args.description,
        type=args.rule_type,
        fixable=args.fixable,
        has_suggestions=bool(args.has_suggestions),
        configs_by_severity=_parse_severities(args.severities),
        options=_load_options(Path(args.options_file)) if args.options_file else [],
        source=Path(args.source).read_text(encoding="utf-8") if args.source else None,
    )

    templates_dir = Path(args.templates_dir) if args.templates_dir else config.templates_dir
    orchestrator = _orchestrator_for(config, templates_dir=templates_dir)
    updated = orchestrator.enhance_rule_doc(
        rule,
        doc_contents,
        ai_provider=args.ai_provider or config.ai.provider,
        ai_model=args.ai_model or config.ai.model,
        end_of_line=end_of_line,
    )
    if args.dry_run:
        return updated
    if updated != doc_contents:
        doc_path.write_text(updated, encoding="utf-8", newline="")
        print(f"Rule doc updated at {_relativize(doc_path)}")
    else:
        print("Rule doc unchanged")
    return None


def _orchestrator_for(config: RuleDocsConfig, *, templates_dir: Optional[Path] = None) -> Orchestrator:
    return Orchestrator(
        rule_doc_enhancer=RuleDocEnhancer(prompt_builder=RuleDocPromptBuilder(templates_dir)),
        request_timeout=config.ai.request_timeout,
    )


def _parse_pin(value: str) -> ConfigEmoji:
    name, separator, emoji = value.partition("=")
    name = name.strip()
    if not name:
        raise ConfigError(f"Invalid --pin value: {value!r}")
    if not separator:
        return ConfigEmoji(config=name)
    return ConfigEmoji(config=name, emoji=emoji.strip() or None)


def _parse_severities(values: List[str]) -> Dict[str, List[str]]:
    configs_by_severity: Dict[str, List[str]] = {}
    for value in values:
        severity, separator, names = value.partition("=")
        severity = severity.strip().lower()
        if not separator or severity not in SEVERITY_ORDER:
            raise ConfigError(f"Invalid --severity value: {value!r}")
        configs = configs_by_severity.setdefault(severity, [])
        configs.extend(name.strip() for name in names.split(",") if name.strip())
    return configs_by_severity


def _load_options(path: Path) -> List[Dict[str, Any]]:
    """Read a rule options schema: a JSON array of option objects, or a single object."""
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if isinstance(loaded, dict):
        return [loaded]
    if isinstance(loaded, list) and all(isinstance(item, dict) for item in loaded):
        return loaded
    raise ConfigError(f"{path.name} must contain a JSON object or an array of objects")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
