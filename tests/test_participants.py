"""Tests for dymo_badge_printer.participants."""

import pytest

from dymo_badge_printer.models import Participant
from dymo_badge_printer.participants import read_participants


def test_reads_rows_in_order(csv_file):
    participants = read_participants(csv_file)
    assert participants == [
        Participant(nom='Dupont', prenom='Marie', role='speaker'),
        Participant(nom='Martin', prenom='Paul', role='participant'),
        Participant(nom='Bernard', prenom='Lea', role='mc'),
    ]


def test_incomplete_rows_skipped(tmp_path):
    path = tmp_path / 'p.csv'
    path.write_text(
        'nom,prenom,role\n'
        'Dupont,Marie,speaker\n'
        ',Paul,participant\n'
        'Bernard,,mc\n'
        'Petit,Luc,   \n'
        'Roux,Anne\n',
        encoding='utf-8',
    )
    assert [p.nom for p in read_participants(path)] == ['Dupont']


def test_bom_and_header_case(tmp_path):
    path = tmp_path / 'p.csv'
    path.write_text('\ufeffNom, Prenom ,ROLE,email\nDurand,Zoé,Speaker,z@example.com\n', encoding='utf-8')
    participants = read_participants(path)
    assert participants == [Participant(nom='Durand', prenom='Zoé', role='speaker')]


def test_missing_column(tmp_path):
    path = tmp_path / 'p.csv'
    path.write_text('nom,prenom\nDupont,Marie\n', encoding='utf-8')
    with pytest.raises(ValueError, match='role'):
        read_participants(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_participants(tmp_path / 'nope.csv')


def test_empty_file(tmp_path):
    path = tmp_path / 'p.csv'
    path.write_text('', encoding='utf-8')
    with pytest.raises(ValueError):
        read_participants(path)


def test_full_name():
    assert Participant(nom=' Dupont ', prenom='Marie').full_name == 'Marie Dupont'
