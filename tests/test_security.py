"""Tests for the lexical security scan."""

import json

import pytest

from extguard.api import analyze
from extguard.codes import IssueCode
from extguard.contracts import Artifact
from extguard.kernel.security import SECURITY_RULES, is_scannable, scan_artifact, scan_artifacts


VALID_BASE = {
    "manifest_version": 3,
    "name": "Test Extension",
    "version": "1.0.0",
    "description": "A test extension",
}


def make_files(manifest, extras=()):
    return [Artifact(name="manifest.json", content=json.dumps(manifest, indent=2)), *extras]


def scan(name, content):
    return scan_artifact(Artifact(name=name, content=content))


def test_flags_eval():
    report = analyze(make_files(VALID_BASE, [Artifact(name="content.js", content='eval("alert(1)")')]))
    errors = report.errors
    assert len(errors) == 1
    assert errors[0].message.startswith("content.js: ")
    assert "eval()" in errors[0].message
    assert errors[0].path == "content.js"


def test_flags_new_function():
    issues = scan("bg.js", 'const f = new Function("return 1");')
    assert [i.code for i in issues] == [IssueCode.DYNAMIC_CODE_EXECUTION]
    assert issues[0].level == "error"
    assert "new Function()" in issues[0].message


def test_flags_remote_script_in_html():
    issues = scan("popup.html", '<script src="https://evil.com/payload.js"></script>')
    assert [i.code for i in issues] == [IssueCode.REMOTE_SCRIPT]
    assert issues[0].level == "error"
    assert "remote script" in issues[0].message


def test_local_script_tag_is_fine():
    assert scan("popup.html", '<script src="popup.js"></script>') == []


def test_flags_innerhtml():
    issues = scan("content.js", "el.innerHTML = userInput;")
    assert [i.code for i in issues] == [IssueCode.UNSAFE_DOM_SINK]
    assert issues[0].level == "warning"
    assert "innerHTML" in issues[0].message


def test_innerhtml_comparison_is_not_a_write():
    assert scan("content.js", 'if (el.innerHTML === "") { return; }') == []


@pytest.mark.parametrize(
    "snippet, code, level",
    [
        ('eval("1 + 1")', IssueCode.DYNAMIC_CODE_EXECUTION, "error"),
        ('new Function("return 1")', IssueCode.DYNAMIC_CODE_EXECUTION, "error"),
        ("el.outerHTML += extra;", IssueCode.UNSAFE_DOM_SINK, "warning"),
        ('document.write("<p>hi</p>")', IssueCode.UNSAFE_DOM_SINK, "warning"),
        ("const decoded = atob(payload);", IssueCode.BASE64_DECODE, "warning"),
        ("const c = document.cookie;", IssueCode.COOKIE_ACCESS, "warning"),
        ("chrome.cookies.getAll({}, cb);", IssueCode.COOKIE_ACCESS, "warning"),
        ('document.addEventListener("keydown", onKey);', IssueCode.KEYBOARD_LISTENER, "warning"),
        ("window.onkeypress = handler;", IssueCode.KEYBOARD_LISTENER, "warning"),
        ('<body onkeydown="record(event)">', IssueCode.KEYBOARD_LISTENER, "warning"),
        ('const apiKey = "sk-123";', IssueCode.CREDENTIAL_IDENTIFIER, "warning"),
        ('const field = form.querySelector("input[type=password]");', IssueCode.CREDENTIAL_IDENTIFIER, "warning"),
        ('fetch("https://api.example.com/data")', IssueCode.NETWORK_CALL, "info"),
        ("const xhr = new XMLHttpRequest();", IssueCode.NETWORK_CALL, "info"),
        ('<script src="//cdn.example.com/lib.js"></script>', IssueCode.REMOTE_SCRIPT, "error"),
    ],
)
def test_each_rule_triggers(snippet, code, level):
    issues = scan("file.js", snippet)
    matching = [i for i in issues if i.code == code]
    assert len(matching) == 1
    assert matching[0].level == level
    assert matching[0].message.startswith("file.js: ")


def test_clean_code_has_no_issues():
    clean_code = """
      const el = document.createElement("div");
      el.textContent = "Hello";
      document.body.appendChild(el);
      chrome.storage.local.set({ count: 1 });
    """
    assert scan("content.js", clean_code) == []


def test_similar_identifiers_do_not_trigger():
    code = "evaluate(x); retrieval(y); myFunction(z); refetch = 1;"
    assert scan("content.js", code) == []


def test_patterns_in_comments_still_trigger():
    issues = scan("content.js", "// never call eval(userInput) here")
    assert [i.code for i in issues] == [IssueCode.DYNAMIC_CODE_EXECUTION]


def test_multiple_rules_follow_table_order():
    code = 'fetch(url); document.cookie; eval(code); el.innerHTML = x;'
    issues = scan("content.js", code)
    assert [i.code for i in issues] == [
        IssueCode.DYNAMIC_CODE_EXECUTION,
        IssueCode.UNSAFE_DOM_SINK,
        IssueCode.COOKIE_ACCESS,
        IssueCode.NETWORK_CALL,
    ]


def test_rule_fires_once_per_file():
    issues = scan("content.js", "eval(a); eval(b); eval(c);")
    assert len(issues) == 1


def test_scan_follows_artifact_order():
    artifacts = [
        Artifact(name="b.js", content="eval(x)"),
        Artifact(name="a.html", content='<script src="https://x.io/a.js"></script>'),
        Artifact(name="c.js", content="atob(s)"),
    ]
    assert [i.path for i in scan_artifacts(artifacts)] == ["b.js", "a.html", "c.js"]


@pytest.mark.parametrize("name", ["content.js", "bg.mjs", "worker.cjs", "src/popup.ts", "popup.html", "opts.htm", "LEGACY.JS"])
def test_scannable_names(name):
    assert is_scannable(name)


@pytest.mark.parametrize("name", ["style.css", "manifest.json", "icon.png", "README.md", "notes.txt"])
def test_unscanned_names(name):
    assert not is_scannable(name)


def test_stylesheets_and_manifest_are_not_scanned():
    artifacts = [
        Artifact(name="manifest.json", content='{"description": "eval(x)"}'),
        Artifact(name="style.css", content="/* eval(x) */ body { color: red; }"),
    ]
    assert scan_artifacts(artifacts) == []


def test_rule_table_shape():
    assert len(SECURITY_RULES) == 10
    dynamic = [r for r in SECURITY_RULES if r.code == IssueCode.DYNAMIC_CODE_EXECUTION]
    assert len(dynamic) == 2
    assert all(r.level == "error" for r in dynamic)
    assert SECURITY_RULES[-1].code == IssueCode.REMOTE_SCRIPT
