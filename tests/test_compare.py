import logging

from bitsha1 import compare


def test_reference_sha1():
    assert compare.reference_sha1(b'') == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    assert compare.reference_sha1(bytearray(b'sha')) == 'd8f4590320e1343a915b6394170650a8f35d6926'


def test_demo_messages_match():
    for m in compare.DEMO_MESSAGES:
        c = compare.compare(m)
        assert c.match, m
        assert c.message == m


def test_compare_encodes_text():
    c = compare.compare('hello world!')
    assert c.message == b'hello world!'
    assert c.ours == c.reference


def test_main_defaults_to_demo(capsys):
    assert compare.main([]) == 0

    out = capsys.readouterr().out
    assert 'Message = hello world!' in out
    assert out.count('result of bitsha1') == len(compare.DEMO_MESSAGES)
    assert 'da39a3ee5e6b4b0d3255bfef95601890afd80709 - result of bitsha1' in out


def test_main_with_arguments(capsys):
    assert compare.main(['sha', 'Sha']) == 0

    out = capsys.readouterr().out
    assert 'd8f4590320e1343a915b6394170650a8f35d6926 - result of bitsha1' in out
    assert 'ba79baeb9f10896a46ae74715271b7f586e74640 - result of reference SHA-1 (cryptography)' in out


def test_main_reports_mismatch(monkeypatch, caplog, capsys):
    monkeypatch.setattr(compare, 'reference_sha1', lambda data: '0' * 40)

    with caplog.at_level(logging.WARNING, logger='bitsha1.compare'):
        assert compare.main(['sha']) == 1

    assert 'Digest mismatch' in caplog.text
