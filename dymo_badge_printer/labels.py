"""
Badge Labels
============

DieCutLabel XML for a DYMO 30252 Address label: the participant's name in
large type at the top left, the role in small type at the bottom.
"""

from pathlib import Path
from xml.sax.saxutils import escape

from .config import ROLE_LABELS, DEFAULT_ROLE_LABEL
from .models import Participant

LABEL_TEMPLATE = """<DieCutLabel Version="8.0" Units="twips">
    <PaperOrientation>Landscape</PaperOrientation>
    <Id>Address</Id>
    <PaperName>30252 Address</PaperName>
    <DrawCommands/>
{objects}
</DieCutLabel>"""

TEXT_OBJECT_TEMPLATE = """    <ObjectInfo>
        <TextObject>
            <Name>{name}</Name>
            <ForeColor Alpha="255" Red="0" Green="0" Blue="0"/>
            <BackColor Alpha="0" Red="255" Green="255" Blue="255"/>
            <LinkedObjectName/>
            <Rotation>Rotation0</Rotation>
            <IsMirrored>False</IsMirrored>
            <IsVariable>True</IsVariable>
            <HorizontalAlignment>Left</HorizontalAlignment>
            <VerticalAlignment>{valign}</VerticalAlignment>
            <TextFitMode>ShrinkToFit</TextFitMode>
            <UseFullFontHeight>True</UseFullFontHeight>
            <Verticalized>False</Verticalized>
            <StyledText>
                <Element>
                    <String>{text}</String>
                    <Attributes>
                        <Font Family="Arial" Size="{size}" Bold="{bold}" Italic="False" Underline="False" Strikeout="False"/>
                        <ForeColor Alpha="255" Red="0" Green="0" Blue="0"/>
                    </Attributes>
                </Element>
            </StyledText>
        </TextObject>
        <Bounds X="150" Y="{y}" Width="3000" Height="{height}"/>
    </ObjectInfo>"""


def role_display(role: str) -> str:
    """Text printed for a role (unknown roles print as PARTICIPANT)."""
    return ROLE_LABELS.get((role or '').strip().lower(), DEFAULT_ROLE_LABEL)


def _text_object(name: str, text: str, valign: str, size: int, bold: bool,
                 y: int, height: int) -> str:
    return TEXT_OBJECT_TEMPLATE.format(
        name=name,
        text=escape(text),
        valign=valign,
        size=size,
        bold='True' if bold else 'False',
        y=y,
        height=height,
    )


def generate_label_xml(participant: Participant) -> str:
    """Build the label markup for one participant."""
    objects = [
        _text_object('NAME', participant.full_name, 'Top', 14, True, 150, 400),
        _text_object('ROLE', role_display(participant.role), 'Bottom', 8, False, 600, 250),
    ]
    return LABEL_TEMPLATE.format(objects='\n'.join(objects))


def label_filename(participant: Participant) -> str:
    """File name for an exported label: <prenom>_<nom>_<role>.xml"""
    parts = [participant.prenom, participant.nom, participant.role or 'participant']
    safe = ['_'.join(p.replace('/', '-').replace('\\', '-').split()) for p in parts]
    return '_'.join(safe) + '.xml'


def export_label(participant: Participant, markup: str, output_dir) -> Path:
    """Write label markup to output_dir, returning the file path."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / label_filename(participant)
    path.write_text(markup, encoding='utf-8')
    return path
