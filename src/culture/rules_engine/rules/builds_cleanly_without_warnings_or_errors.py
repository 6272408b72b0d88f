from __future__ import annotations

from culture.adapters.cargo.build_messages import diagnostics_from_build_output
from culture.connectors.cargo.commands import CargoInvocationError, cargo_build, cargo_clean

from ..config import BuildsCleanlyRuleConfig
from ..context import RuleContext
from ..models import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class BUILDS_CLEANLY_WITHOUT_WARNINGS_OR_ERRORS(Rule):
    rule_id = "BUILDS-CLEANLY-WITHOUT-WARNINGS-OR-ERRORS"
    description = "Should `cargo clean` and `cargo build` without any warnings or errors."
    config_model = BuildsCleanlyRuleConfig

    def evaluate(self, ctx: RuleContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, BuildsCleanlyRuleConfig)

        if cfg.clean_before_build:
            clean_outcome = self._clean_packages(ctx)
            if clean_outcome is not None:
                return clean_outcome

        try:
            output = cargo_build(ctx.toolchain, ctx.manifest_path)
        except CargoInvocationError as exc:
            ctx.note(str(exc))
            return RuleOutcome.UNDETERMINED

        if not output.success:
            ctx.note(f"Build command `{output.command_str}` failed")
            ctx.note(f"`{output.command_str}` StdErr: {output.stderr_text()}")
            return RuleOutcome.FAILURE

        try:
            stdout = output.stdout_text()
        except UnicodeDecodeError as exc:
            ctx.note(f"Reading stdout for command `{output.command_str}` failed : {exc}")
            return RuleOutcome.UNDETERMINED

        diagnostics = diagnostics_from_build_output(stdout, output.stderr_text())
        if not diagnostics.clean:
            ctx.note(f"`{output.command_str}` reported {diagnostics.count} warning(s) or error(s)")
            for diag in diagnostics.items:
                ctx.note(f"{diag.level}: {diag.message}")
            return RuleOutcome.FAILURE
        return RuleOutcome.SUCCESS

    def _clean_packages(self, ctx: RuleContext):
        """Clean every package so cached artifacts cannot hide warnings.

        Returns an outcome to stop with, or None to continue to the build.
        """
        metadata = ctx.metadata
        if metadata is None or not metadata.packages:
            # Nothing to clean by name; the build alone still decides.
            ctx.note("No metadata to discover which packages to clean.")
            return None

        for pkg in metadata.packages:
            try:
                output = cargo_clean(ctx.toolchain, ctx.manifest_path, pkg.name)
            except CargoInvocationError as exc:
                ctx.note(str(exc))
                return RuleOutcome.UNDETERMINED
            if not output.success:
                ctx.note(f"Could not clean package {pkg.name} .")
                return RuleOutcome.FAILURE
        return None
