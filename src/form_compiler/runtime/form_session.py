"""
Form Session - live state of one rendered form.

Owns the current values, the surfaced per-field errors and the visible set,
and keeps them consistent across edits and locale switches:

- value change: visibility is recomputed for the fields that depend on the
  edited one; field-local checks run for the edited field; every cross-field
  rule that reads the field is re-run and its target revalidated
- locale change: descriptors are recompiled and all error messages are
  re-resolved in the new language
- submit: only when the whole form is valid; hidden fields are kept in the
  payload unless the config says to drop them

Every public mutation computes the next state on copies and commits it in a
single assignment step, so no caller ever observes a half-applied transition.
Sessions never share mutable state.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from form_compiler.config import FormConfig
from form_compiler.rules.cross_field import CrossFieldRule
from form_compiler.runtime.schema_compiler import compile_schema
from form_compiler.runtime.visibility import build_dependents, compute_visible, is_visible
from form_compiler.schemas.descriptor import FieldDescriptor, FormState
from form_compiler.schemas.form_schema import FormSchema

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[Dict[str, Any]], None]


class UnknownFieldError(KeyError):
    """Raised when a value is set for a field the schema does not declare."""

    def __init__(self, names: Iterable[str]):
        self.names = sorted(names)
        super().__init__(f"Unknown form field(s): {', '.join(self.names)}")


class FormSession:
    """Live form state driven by a FormSchema and a translator."""

    def __init__(
        self,
        schema: FormSchema,
        translate: Callable[..., str],
        defaults: Optional[Mapping[str, Any]] = None,
        on_submit: Optional[SubmitCallback] = None,
        config: Optional[FormConfig] = None,
    ):
        self._schema = schema
        self._translate = translate
        self._on_submit = on_submit
        self._config = config or FormConfig()

        defaults = dict(defaults or {})
        unknown = set(defaults) - set(schema.fields)
        if unknown:
            logger.warning("Ignoring defaults for undeclared fields: %s", sorted(unknown))
        self._defaults = {name: defaults.get(name) for name in schema.fields}

        # Rules indexed by every field they read or report on
        self._rules_by_field: Dict[str, List[CrossFieldRule]] = {}
        self._rules_by_target: Dict[str, List[CrossFieldRule]] = {}
        for rule in schema.rules:
            for name in rule.triggers | {rule.path}:
                self._rules_by_field.setdefault(name, []).append(rule)
            self._rules_by_target.setdefault(rule.path, []).append(rule)

        self._descriptors: List[FieldDescriptor] = compile_schema(schema, translate)
        self._dependents = build_dependents(self._descriptors)
        self._values: Dict[str, Any] = dict(self._defaults)
        self._visible: FrozenSet[str] = compute_visible(self._descriptors, self._values)
        self._issues: Dict[str, str] = self._evaluate(self._values, self._visible, schema.fields)
        # Every rule is checked, including rules whose target is hidden
        self._failed_rules: List[str] = self._failing_rules(self._values)
        # Fields whose error is computed but not displayed (after reset)
        self._pristine: Set[str] = set()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def descriptors(self) -> List[FieldDescriptor]:
        return list(self._descriptors)

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return {name: msg for name, msg in self._issues.items() if name not in self._pristine}

    @property
    def visible(self) -> FrozenSet[str]:
        return self._visible

    @property
    def is_valid(self) -> bool:
        """No error on any visible field and every cross-field rule passes."""
        return not self._issues and not self._failed_rules

    @property
    def locale(self) -> Optional[str]:
        return getattr(self._translate, "locale", None)

    def visible_descriptors(self) -> List[FieldDescriptor]:
        """Descriptors of the fields currently shown, in declaration order."""
        return [d for d in self._descriptors if d.name in self._visible]

    def snapshot(self) -> FormState:
        return FormState(
            values=MappingProxyType(dict(self._values)),
            errors=MappingProxyType(self.errors),
            visible=self._visible,
            is_valid=self.is_valid,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_value(self, name: str, value: Any) -> FormState:
        """Apply one user edit."""
        return self.update({name: value})

    def update(self, changes: Mapping[str, Any]) -> FormState:
        """
        Apply a batch of edits as a single transition.

        Args:
            changes: Field name -> new raw value

        Returns:
            Snapshot after the transition

        Raises:
            UnknownFieldError: If a name is not declared by the schema
        """
        unknown = set(changes) - set(self._schema.fields)
        if unknown:
            raise UnknownFieldError(unknown)

        changed = set(changes)
        values = {**self._values, **changes}

        # Visibility only needs recomputing where a rule reads an edited field
        visible = set(self._visible)
        by_name = {d.name: d for d in self._descriptors}
        affected: Set[str] = set()
        for name in changed:
            affected |= self._dependents.get(name, frozenset())
        for name in affected:
            if is_visible(by_name[name].visibility_rule, values):
                visible.add(name)
            else:
                visible.discard(name)
        toggled = {name for name in affected if (name in visible) != (name in self._visible)}

        to_validate = changed | toggled
        for name in changed:
            for rule in self._rules_by_field.get(name, []):
                to_validate.add(rule.path)
                to_validate |= rule.revalidate

        frozen_visible = frozenset(visible)
        issues = {name: msg for name, msg in self._issues.items() if name not in to_validate}
        issues.update(self._evaluate(values, frozen_visible, to_validate))
        failed_rules = self._failing_rules(values)

        # Commit
        self._values = values
        self._visible = frozen_visible
        self._issues = issues
        self._failed_rules = failed_rules
        self._pristine -= to_validate
        return self.snapshot()

    def change_locale(self, translate: Callable[..., str]) -> FormState:
        """Recompile descriptors for a new translator and re-resolve all messages."""
        descriptors = compile_schema(self._schema, translate)
        self._translate = translate
        self._descriptors = descriptors
        self._dependents = build_dependents(descriptors)
        self._visible = compute_visible(descriptors, self._values)
        self._issues = self._evaluate(self._values, self._visible, self._schema.fields)
        self._failed_rules = self._failing_rules(self._values)
        logger.debug("Form recompiled for locale %s", self.locale)
        return self.snapshot()

    def validate(self) -> bool:
        """Full validation pass; surfaces every error, including pristine fields."""
        self._issues = self._evaluate(self._values, self._visible, self._schema.fields)
        self._failed_rules = self._failing_rules(self._values)
        self._pristine = set()
        return self.is_valid

    def submit(self) -> bool:
        """
        Hand the current values to the submit callback if the form is valid.

        Returns:
            True if the callback was invoked (or would have been, without one)
        """
        if not self.is_valid:
            self._pristine = set()
            logger.info(
                "Submit rejected: invalid fields %s, failing rules %s",
                sorted(self._issues),
                self._failed_rules,
            )
            return False

        payload = dict(self._values)
        if self._config.hidden_values == "drop":
            payload = {name: value for name, value in payload.items() if name in self._visible}

        if self._on_submit is not None:
            self._on_submit(payload)
        return True

    def reset(self) -> FormState:
        """Restore defaults, hide all errors and recompute visibility."""
        values = dict(self._defaults)
        visible = compute_visible(self._descriptors, values)
        self._values = values
        self._visible = visible
        self._issues = self._evaluate(values, visible, self._schema.fields)
        self._failed_rules = self._failing_rules(values)
        self._pristine = set(self._schema.fields)
        return self.snapshot()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _evaluate(
        self,
        values: Mapping[str, Any],
        visible: FrozenSet[str],
        names: Iterable[str],
    ) -> Dict[str, str]:
        issues = {}
        for name in names:
            message = self._field_issue(name, values, visible)
            if message is not None:
                issues[name] = message
        return issues

    def _field_issue(
        self, name: str, values: Mapping[str, Any], visible: FrozenSet[str]
    ) -> Optional[str]:
        """Localized error for one field: field-local checks first, then rules."""
        if name not in visible:
            return None

        issue = self._schema.fields[name].validate_value(values.get(name))
        if issue is not None:
            return self._translate(issue.message, values=issue.values)

        for rule in self._rules_by_target.get(name, []):
            if not self._rule_passes(rule, values):
                return rule.message(self._translate)
        return None

    def _failing_rules(self, values: Mapping[str, Any]) -> List[str]:
        return [rule.name for rule in self._schema.rules if not self._rule_passes(rule, values)]

    def _rule_passes(self, rule: CrossFieldRule, values: Mapping[str, Any]) -> bool:
        try:
            return rule.check(values)
        except Exception:
            logger.exception("Rule '%s' raised while validating '%s'", rule.name, rule.path)
            return False
