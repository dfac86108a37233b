# FxCop XML reports: walk targets, modules, namespaces, types and members down to
# the reported issues, resolving rule metadata from the report's Rules section.

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional

from analysis_model.errors import ParsingException
from analysis_model.findings.builder import IssueBuilder
from analysis_model.findings.models import Severity
from analysis_model.findings.report import Report
from analysis_model.parsers.base import CancelCheck, IssueParser
from analysis_model.parsers.fxcop.rules import FxCopRuleSet
from analysis_model.reader import ReaderFactory

logger = logging.getLogger(__name__)

ROOT_TAG = "FxCopReport"


@dataclass(frozen=True)
class Scope:
    """
    Naming context of the element being visited.

    module is the enclosing target/module (assembly) name, name the dotted
    namespace/type name. Each level derives a new Scope; siblings never see
    each other's names.
    """

    module: Optional[str] = None
    name: Optional[str] = None

    def in_module(self, module: str) -> Scope:
        return Scope(module=module or self.module, name=self.name)

    def in_namespace(self, namespace: str) -> Scope:
        return Scope(module=self.module, name=namespace)

    def in_type(self, type_name: str) -> Scope:
        if self.name:
            return Scope(module=self.module, name=f"{self.name}.{type_name}")
        return Scope(module=self.module, name=type_name)


def get_priority(level: str) -> Severity:
    """Map an FxCop Level attribute; the first matching keyword wins."""
    if "Error" in level or "Critical" in level:
        return Severity.WARNING_HIGH
    if "Warning" in level:
        return Severity.WARNING_NORMAL
    return Severity.WARNING_LOW


def _children(element: ET.Element, container: str, tag: str) -> Iterator[ET.Element]:
    """Yield the <tag> children of the first <container> child, in document order."""
    wrapper = element.find(container)
    if wrapper is None:
        return
    yield from wrapper.findall(tag)


def _find_root(document: ET.Element) -> ET.Element:
    if document.tag == ROOT_TAG:
        return document
    root = document.find(f".//{ROOT_TAG}")
    if root is None:
        raise ParsingException(f"No {ROOT_TAG} element found (document root is <{document.tag}>)")
    return root


class FxCopParser(IssueParser):
    """
    Parses FxCop XML reports.

    Instances keep the rule set and report of the running parse as
    attributes; do not share one instance between concurrent parses.
    """

    id = "fxcop"
    name = "FxCop"

    def __init__(self) -> None:
        self.rule_set = FxCopRuleSet()
        self.report = Report()
        self._builder = IssueBuilder()

    def parse(
        self,
        reader_factory: ReaderFactory,
        *,
        is_canceled: Optional[CancelCheck] = None,
    ) -> Report:
        self.rule_set = FxCopRuleSet()
        self.report = Report()
        self._builder = self.create_builder()

        root = _find_root(reader_factory.read_document())
        self._parse_rules(root)
        logger.debug("Indexed %d FxCop rule(s)", len(self.rule_set))

        scope = Scope()
        self._parse_namespaces(root, scope)
        self._parse_targets(root, scope)

        logger.info("%s: %d issue(s) in %s", self.name, len(self.report), reader_factory.file_name)
        return self.report

    def _parse_rules(self, root: ET.Element) -> None:
        for rule in _children(root, "Rules", "Rule"):
            self.rule_set.add_rule(rule)

    def _parse_targets(self, root: ET.Element, scope: Scope) -> None:
        for target in _children(root, "Targets", "Target"):
            target_scope = scope.in_module(target.get("Name", ""))
            self._parse_messages(target, target_scope)
            self._parse_modules(target, target_scope)
            self._parse_resources(target, target_scope)

    def _parse_resources(self, target: ET.Element, scope: Scope) -> None:
        for resource in _children(target, "Resources", "Resource"):
            self._parse_messages(resource, scope)

    def _parse_modules(self, target: ET.Element, scope: Scope) -> None:
        for module in _children(target, "Modules", "Module"):
            module_scope = scope.in_module(module.get("Name", ""))
            self._parse_messages(module, module_scope)
            self._parse_namespaces(module, module_scope)

    def _parse_namespaces(self, element: ET.Element, scope: Scope) -> None:
        for namespace in _children(element, "Namespaces", "Namespace"):
            namespace_scope = scope.in_namespace(namespace.get("Name", ""))
            self._parse_messages(namespace, namespace_scope)
            self._parse_types(namespace, namespace_scope)

    def _parse_types(self, namespace: ET.Element, scope: Scope) -> None:
        for type_element in _children(namespace, "Types", "Type"):
            type_scope = scope.in_type(type_element.get("Name", ""))
            self._parse_messages(type_element, type_scope)
            self._parse_members(type_element, type_scope)

    def _parse_members(self, type_element: ET.Element, scope: Scope) -> None:
        for member in _children(type_element, "Members", "Member"):
            self._parse_member(member, scope)

    def _parse_accessors(self, member: ET.Element, scope: Scope) -> None:
        for accessor in _children(member, "Accessors", "Accessor"):
            self._parse_member(accessor, scope)

    def _parse_member(self, member: ET.Element, scope: Scope) -> None:
        self._parse_messages(member, scope)
        self._parse_accessors(member, scope)

    def _parse_messages(self, element: ET.Element, scope: Scope) -> None:
        for message in _children(element, "Messages", "Message"):
            for issue in message.findall("Issue"):
                self._parse_issue(issue, message, scope)

    def _parse_issue(self, issue: ET.Element, message: ET.Element, scope: Scope) -> None:
        type_name = message.get("TypeName", "")
        category = message.get("Category", "")
        check_id = message.get("CheckId", "")
        level = issue.get("Level", "")

        rule = self.rule_set.get_rule(category, check_id)
        if rule is None:
            text = type_name
        else:
            text = f'<a href="{rule.url}">{type_name}</a>'
        body = "".join(issue.itertext()).strip()
        if body:
            text = f"{text} - {body}"

        path = issue.get("Path", "")
        file_name = issue.get("File", "")
        if path and file_name:
            file_name = f"{path}/{file_name}"

        self.report.add(
            self._builder.set_file_name(file_name)
            .set_line_start(issue.get("Line"))
            .set_category(category)
            .set_type(check_id or None)
            .set_package_name(scope.name or None)
            .set_module_name(scope.module or None)
            .set_message(text)
            .set_description(rule.description if rule is not None else None)
            .set_severity(get_priority(level))
            .build()
        )
