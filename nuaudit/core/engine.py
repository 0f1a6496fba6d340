"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order,
turns failures into diagnostics, and packages output.

The engine is NOT where extraction logic lives.
"""

import json
from dataclasses import dataclass
from typing import Optional

from nuaudit.core.context import AuditContext, AuditRequest
from nuaudit.core.contracts import Pass
from nuaudit.core.logging import AuditLogger
from nuaudit.grammar.parser import AuditSyntaxError
from nuaudit.ir.enums import AuditStatus, DiagnosticLevel
from nuaudit.ir.schema import AuditReport, AuditResult, Diagnostic
from nuaudit.ir.serialization import to_json


class AuditParseError(Exception):
    """A parse failed as a whole; no partial result exists."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        diagnostics: Optional[list[Diagnostic]] = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.diagnostics = diagnostics or []
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{location}")

    @classmethod
    def from_report(cls, report: AuditReport) -> "AuditParseError":
        """Build from the first error diagnostic of a failed report."""
        errors = [d for d in report.diagnostics if d.level == DiagnosticLevel.ERROR]
        first = errors[0] if errors else None
        return cls(
            message=first.message if first else "Audit parse failed",
            line=first.line if first else None,
            column=first.column if first else None,
            diagnostics=report.diagnostics,
        )


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[Pass]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, handles errors, and packages results.
    """

    def __init__(self) -> None:
        self._pipelines: dict[str, Pipeline] = {}

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def transform(
        self,
        request: AuditRequest,
        pipeline_id: Optional[str] = None,
    ) -> AuditReport:
        """
        Run a parse.

        Args:
            request: The parse request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            AuditReport with result, trace, and diagnostics
        """
        pipeline_id = pipeline_id or "default"

        if pipeline_id not in self._pipelines:
            ctx = AuditContext(request=request, raw_text=request.text)
            ctx.status = AuditStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_report()

        try:
            ctx = AuditContext.from_request(request)
        except (FileNotFoundError, ValueError) as e:
            code = "PROFILE_NOT_FOUND" if isinstance(e, FileNotFoundError) else "PROFILE_INVALID"
            ctx = AuditContext(request=request, raw_text=request.text)
            ctx.status = AuditStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code=code,
                message=str(e),
                source="engine",
            )
            return ctx.to_report()

        pipeline = self._pipelines[pipeline_id]
        alog = AuditLogger(request.request_id)

        # Run passes in order
        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                alog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                alog.pass_end(pass_name)

            except AuditSyntaxError as e:
                alog.pass_error(pass_name, e)
                self._fail(ctx, pass_name, "SYNTAX_ERROR", e.message, line=e.line, column=e.column)
                break

            except ValueError as e:
                alog.pass_error(pass_name, e)
                self._fail(ctx, pass_name, "CONVERSION_ERROR", str(e))
                break

            except Exception as e:
                alog.pass_error(pass_name, e)
                self._fail(ctx, pass_name, "PASS_ERROR", f"Pass '{pass_name}' failed: {e}")
                break

        result = ctx.result
        alog.parse_complete(
            status=ctx.status.value,
            complete_courses=len(result.complete_courses),
            ip_courses=len(result.ip_courses),
            required_courses=len(result.required_courses),
            nupaths=len(result.complete_nupaths) + len(result.ip_nupaths) + len(result.required_nupaths),
            diagnostics=len(ctx.diagnostics),
        )

        return ctx.to_report()

    @staticmethod
    def _fail(ctx: AuditContext, pass_name: str, code: str, message: str, **location) -> None:
        ctx.status = AuditStatus.ERROR
        ctx.add_diagnostic(
            level="error",
            code=code,
            message=message,
            source=pass_name,
            **location,
        )
        ctx.add_trace(pass_name=pass_name, action="error")


def setup_default_pipelines(engine: Engine) -> None:
    """Register the built-in 'default' and 'raw' pipelines."""
    from nuaudit.passes import dedupe_courses, package, parse_tree, walk_tree

    engine.register_pipeline(
        Pipeline(
            id="default",
            name="Default Audit Pipeline",
            passes=[
                parse_tree,
                walk_tree,
                dedupe_courses,  # Same course listed under several requirements
                package,
            ],
        )
    )
    engine.register_pipeline(
        Pipeline(
            id="raw",
            name="Raw Audit Pipeline (every listed course line kept)",
            passes=[
                parse_tree,
                walk_tree,
                package,
            ],
        )
    )


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance, with built-in pipelines."""
    global _engine
    if _engine is None:
        _engine = Engine()
        setup_default_pipelines(_engine)
    return _engine


def parse_audit(text: str, profile: Optional[str] = None) -> AuditResult:
    """
    Parse audit text into an AuditResult.

    Entries that cannot be classified are dropped with a warning;
    the call still succeeds.

    Args:
        text: Raw audit export
        profile: Format profile name or YAML path (default profile if None)

    Raises:
        AuditParseError: If the text cannot be parsed as a whole
    """
    report = get_engine().transform(AuditRequest(text=text, profile=profile))
    if report.status == AuditStatus.ERROR:
        raise AuditParseError.from_report(report)
    return report.result


def parse_audit_json(text: str) -> str:
    """
    Parse audit text straight to JSON.

    Returns the AuditResult JSON on success, or a JSON object with
    "error", "line" and "column" keys on failure. Never raises for
    malformed input.
    """
    try:
        result = parse_audit(text)
    except AuditParseError as e:
        return json.dumps({"error": e.message, "line": e.line, "column": e.column})
    return to_json(result)
