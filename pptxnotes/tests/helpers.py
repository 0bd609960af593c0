import io
import zipfile


A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
P_NS = "http://schemas.openxmlformats.org/presentationml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

NOTES_SLIDE_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    f'<p:notes xmlns:a="{A_NS}" xmlns:p="{P_NS}" xmlns:r="{R_NS}">'
    "<p:cSld><p:spTree>"
    '<p:sp><p:nvSpPr><p:cNvPr id="2" name="Slide Image Placeholder 1"/>'
    '<p:cNvSpPr/><p:nvPr><p:ph type="sldImg"/></p:nvPr></p:nvSpPr><p:spPr/></p:sp>'
    '<p:sp><p:nvSpPr><p:cNvPr id="3" name="Notes Placeholder 2"/>'
    '<p:cNvSpPr/><p:nvPr><p:ph type="body" idx="1"/></p:nvPr></p:nvSpPr><p:spPr/>'
    "<p:txBody><a:bodyPr/><a:lstStyle/>{paragraphs}</p:txBody></p:sp>"
    "</p:spTree></p:cSld></p:notes>"
)

NOTES_SLIDE_WITHOUT_BODY = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    f'<p:notes xmlns:a="{A_NS}" xmlns:p="{P_NS}"><p:cSld><p:spTree/></p:cSld></p:notes>'
)

NOTES_RELS = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/'
    'relationships/slide" Target="../slides/slide1.xml"/></Relationships>'
)


def run_xml(text: str | None, **attrs: str) -> str:
    """An ``a:r`` element; ``attrs`` become ``a:rPr`` attributes in the given order."""
    rpr = ""
    if attrs:
        rendered = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        rpr = f'<a:rPr lang="en-US" {rendered} dirty="0"/>'
    t = f"<a:t>{text}</a:t>" if text is not None else ""
    return f"<a:r>{rpr}{t}</a:r>"


def paragraph_xml(*runs: str, lvl: str | None = None) -> str:
    ppr = f'<a:pPr lvl="{lvl}"/>' if lvl is not None else ""
    return f"<a:p>{ppr}{''.join(runs)}</a:p>"


def notes_slide_xml(*paragraphs: str) -> str:
    return NOTES_SLIDE_TEMPLATE.format(paragraphs="".join(paragraphs))


def wrap_fragment(fragment: str) -> str:
    """Wrap a DrawingML fragment in a root declaring the ``a`` namespace."""
    return f'<root xmlns:a="{A_NS}" xmlns:p="{P_NS}">{fragment}</root>'


def build_pptx(entries: dict[str, str]) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(
            "[Content_Types].xml",
            '<?xml version="1.0" encoding="UTF-8"?><Types '
            'xmlns="http://schemas.openxmlformats.org/package/2006/content-types"/>',
        )
        zf.writestr("ppt/presentation.xml", f'<p:presentation xmlns:p="{P_NS}"/>')
        for name, content in entries.items():
            zf.writestr(name, content)
    buffer.seek(0)
    return buffer


