"""Tests for the FxCop XML parser and its rule index."""

import xml.etree.ElementTree as ET

import pytest

from analysis_model.errors import ParsingException
from analysis_model.findings.models import Severity
from analysis_model.parsers.fxcop.parser import FxCopParser, Scope, get_priority
from analysis_model.parsers.fxcop.rules import FxCopRuleSet
from analysis_model.reader import StringReaderFactory

REPORT = r"""<?xml version="1.0" encoding="utf-8"?>
<FxCopReport Version="1.35">
 <Targets>
  <Target Name="C:\build\Lib.dll">
   <Modules>
    <Module Name="lib.dll">
     <Messages>
      <Message TypeName="AssembliesShouldHaveValidStrongNames" Category="Microsoft.Design" CheckId="CA2210">
       <Issue Name="NoStrongName" Level="CriticalError">Sign 'Lib.dll' with a strong name key.</Issue>
      </Message>
     </Messages>
     <Namespaces>
      <Namespace Name="Company.Lib">
       <Types>
        <Type Name="Widget">
         <Messages>
          <Message TypeName="TypesThatOwnDisposableFieldsShouldBeDisposable" Category="Design" CheckId="CA1000">
           <Issue Level="Warning" Path="C:\src\Lib" File="Widget.cs" Line="17">Implement IDisposable on 'Widget'.</Issue>
          </Message>
         </Messages>
         <Members>
          <Member Name="#Run()">
           <Messages>
            <Message TypeName="DoNotCatchGeneralExceptionTypes" Category="Microsoft.Design" CheckId="CA1031">
             <Issue Level="Informational" Path="C:\src\Lib" File="Widget.cs" Line="42">Catch a more specific exception.</Issue>
            </Message>
           </Messages>
           <Accessors>
            <Accessor Name="#get_Name()">
             <Messages>
              <Message TypeName="IdentifiersShouldBeSpelledCorrectly" Category="Microsoft.Naming" CheckId="CA1704">
               <Issue Level="Error" Path="C:\src\Lib" File="Widget.cs" Line="50">Correct the spelling.</Issue>
              </Message>
             </Messages>
            </Accessor>
           </Accessors>
          </Member>
         </Members>
        </Type>
       </Types>
      </Namespace>
     </Namespaces>
    </Module>
   </Modules>
  </Target>
 </Targets>
 <Rules>
  <Rule TypeName="TypesThatOwnDisposableFieldsShouldBeDisposable" Category="Design" CheckId="CA1000">
   <Name>Types that own disposable fields should be disposable</Name>
   <Description>Types that declare disposable members should also implement IDisposable.</Description>
   <Url>http://msdn.example.com/CA1000</Url>
  </Rule>
 </Rules>
</FxCopReport>
"""


def _parse(text: str):
    return FxCopParser().parse(StringReaderFactory(text, file_name="fxcop.xml"))


def test_issues_in_document_order():
    report = _parse(REPORT)
    assert [i.type for i in report] == ["CA2210", "CA1000", "CA1031", "CA1704"]


def test_indexed_rule_adds_link_and_description():
    issue = _parse(REPORT)[1]
    assert "http://msdn.example.com/CA1000" in issue.message
    assert issue.message == (
        '<a href="http://msdn.example.com/CA1000">TypesThatOwnDisposableFieldsShouldBeDisposable</a>'
        " - Implement IDisposable on 'Widget'."
    )
    assert issue.description == "Types that declare disposable members should also implement IDisposable."
    assert issue.category == "Design"
    assert issue.file_name == "C:/src/Lib/Widget.cs"
    assert issue.line_start == 17
    assert issue.severity is Severity.WARNING_NORMAL


def test_unknown_rule_uses_type_name_and_no_description():
    report = _parse(REPORT)
    issue = report[2]
    assert issue.message == "DoNotCatchGeneralExceptionTypes - Catch a more specific exception."
    assert "href" not in issue.message
    assert issue.description is None
    assert issue.severity is Severity.WARNING_LOW


def test_unknown_rule_without_text_is_bare_type_name():
    text = """<FxCopReport>
     <Rules>
      <Rule Category="Design" CheckId="CA1000"><Url>http://x/CA1000</Url></Rule>
     </Rules>
     <Namespaces>
      <Namespace Name="Ns">
       <Messages>
        <Message TypeName="AvoidNamespacesWithFewTypes" Category="Design" CheckId="CA1020">
         <Issue Level="Warning"/>
        </Message>
       </Messages>
      </Namespace>
     </Namespaces>
    </FxCopReport>"""
    issue = _parse(text)[0]
    assert issue.message == "AvoidNamespacesWithFewTypes"
    assert issue.description is None
    assert issue.package_name == "Ns"


def test_naming_context():
    report = _parse(REPORT)
    assert report[0].module_name == "lib.dll"
    assert report[0].package_name is None
    assert report[1].package_name == "Company.Lib.Widget"
    assert report[2].package_name == "Company.Lib.Widget"
    assert report[3].package_name == "Company.Lib.Widget"
    assert report[3].module_name == "lib.dll"


def test_severity_from_level():
    report = _parse(REPORT)
    assert [i.severity for i in report] == [
        Severity.WARNING_HIGH,
        Severity.WARNING_NORMAL,
        Severity.WARNING_LOW,
        Severity.WARNING_HIGH,
    ]


def test_issue_without_path_or_file():
    issue = _parse(REPORT)[0]
    assert issue.file_name == ""
    assert issue.line_start == 0


@pytest.mark.parametrize(
    "level, expected",
    [
        ("CriticalError", Severity.WARNING_HIGH),
        ("Error", Severity.WARNING_HIGH),
        ("CriticalWarning", Severity.WARNING_HIGH),
        ("Warning", Severity.WARNING_NORMAL),
        ("Informational", Severity.WARNING_LOW),
        ("", Severity.WARNING_LOW),
    ],
)
def test_get_priority(level, expected):
    assert get_priority(level) is expected


def test_missing_rules_section_is_not_an_error():
    text = """<FxCopReport><Targets><Target Name="a.dll"><Messages>
      <Message TypeName="T" Category="C" CheckId="X1"><Issue Level="Error">text</Issue></Message>
    </Messages></Target></Targets></FxCopReport>"""
    report = _parse(text)
    assert len(report) == 1
    assert report[0].message == "T - text"
    assert report[0].module_name == "a.dll"


def test_resources_are_visited():
    text = """<FxCopReport><Targets><Target Name="a.dll"><Resources><Resource Name="a.resources">
      <Messages><Message TypeName="T" Category="C" CheckId="R1"><Issue Level="Warning">r</Issue></Message></Messages>
    </Resource></Resources></Target></Targets></FxCopReport>"""
    report = _parse(text)
    assert [i.type for i in report] == ["R1"]


def test_empty_report():
    assert _parse("<FxCopReport/>").is_empty()


def test_report_nested_below_other_root():
    text = "<Wrapper><FxCopReport><Namespaces/></FxCopReport></Wrapper>"
    assert _parse(text).is_empty()


def test_malformed_xml_raises():
    with pytest.raises(ParsingException):
        _parse("<FxCopReport><Targets>")


def test_wrong_document_raises():
    with pytest.raises(ParsingException):
        _parse("<checkstyle/>")


def test_consecutive_parses_do_not_share_rules():
    parser = FxCopParser()
    parser.parse(StringReaderFactory(REPORT))
    assert len(parser.rule_set) == 1
    parser.parse(StringReaderFactory("<FxCopReport/>"))
    assert len(parser.rule_set) == 0


def test_rule_set_lookup():
    rules = FxCopRuleSet()
    element = ET.fromstring(
        '<Rule TypeName="T" Category="Design" CheckId="CA1000">'
        "<Name>n</Name><Description> d </Description><Url>u</Url></Rule>"
    )
    rule = rules.add_rule(element)
    assert rule is not None
    assert rules.has_rule("Design", "CA1000")
    assert not rules.has_rule("Design", "CA1001")
    assert rules.get_rule("Design", "CA1000") == rule
    assert rule.description == "d"
    assert rule.url == "u"
    assert rules.get_rule("Naming", "CA1000") is None


def test_rule_set_ignores_other_elements():
    rules = FxCopRuleSet()
    assert rules.add_rule(ET.fromstring("<NotARule/>")) is None
    assert len(rules) == 0


def test_scope_derivation_does_not_leak():
    root = Scope().in_module("a.dll").in_namespace("Ns")
    widget = root.in_type("Widget")
    gadget = root.in_type("Gadget")
    assert widget.name == "Ns.Widget"
    assert gadget.name == "Ns.Gadget"
    assert root.name == "Ns"
    assert Scope().in_type("Top").name == "Top"
