"""
Presentation access over a local .pptx file (python-pptx).

python-pptx has no public API for duplicating, moving or deleting slides, so
those operate on the slide id list and the package relationships directly.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Dict, List

from pptx import Presentation
from pptx.opc.constants import RELATIONSHIP_TYPE as RT
from pptx.oxml.ns import qn
from pptx.slide import Slide

from src.utils.artifacts import ensure_dir

_R_NS = "{http://schemas.openxmlformats.org/officeDocument/2006/relationships}"

# relationships a duplicate must not share with its source
_SKIP_RELS = {RT.SLIDE_LAYOUT, RT.NOTES_SLIDE}


def _remap_rids(element, rid_map: Dict[str, str]) -> None:
    for el in element.iter():
        for attr, value in el.attrib.items():
            if attr.startswith(_R_NS) and value in rid_map:
                el.set(attr, rid_map[value])


class Deck:
    def __init__(self, prs: Presentation, path: Path | None = None) -> None:
        self.prs = prs
        self.path = path

    @classmethod
    def open(cls, path: Path | str) -> "Deck":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Presentation not found: {path}")
        return cls(Presentation(str(path)), path)

    def save(self, path: Path | str) -> Path:
        path = Path(path)
        ensure_dir(path.parent)
        self.prs.save(str(path))
        return path

    @property
    def slides(self) -> List[Slide]:
        return list(self.prs.slides)

    def get_slide(self, index: int) -> Slide:
        slides = self.slides
        if not 0 <= index < len(slides):
            raise IndexError(f"Template slide not found at index {index}")
        return slides[index]

    def slide_position(self, slide: Slide) -> int:
        for i, sld_id in enumerate(self.prs.slides._sldIdLst):
            if sld_id.id == slide.slide_id:
                return i
        raise ValueError(f"Slide {slide.slide_id} is not part of this presentation")

    def duplicate_slide(self, slide: Slide) -> Slide:
        """Append a copy of ``slide`` (same layout, background, shapes and media)."""
        clone = self.prs.slides.add_slide(slide.slide_layout)

        # drop the layout placeholders add_slide created
        sp_tree = clone.shapes._spTree
        for shape in list(clone.shapes):
            sp_tree.remove(shape._element)

        rid_map: Dict[str, str] = {}
        for rid, rel in slide.part.rels.items():
            if rel.reltype in _SKIP_RELS:
                continue
            if rel.is_external:
                rid_map[rid] = clone.part.relate_to(rel.target_ref, rel.reltype, is_external=True)
            else:
                rid_map[rid] = clone.part.relate_to(rel.target_part, rel.reltype)

        src_bg = slide._element.cSld.find(qn("p:bg"))
        if src_bg is not None:
            bg = copy.deepcopy(src_bg)
            _remap_rids(bg, rid_map)
            clone._element.cSld.insert(0, bg)

        for shape in slide.shapes:
            el = copy.deepcopy(shape._element)
            _remap_rids(el, rid_map)
            sp_tree.insert_element_before(el, "p:extLst")

        return clone

    def move_slide(self, slide: Slide, position: int) -> None:
        sld_id_lst = self.prs.slides._sldIdLst
        sld_id = list(sld_id_lst)[self.slide_position(slide)]
        sld_id_lst.remove(sld_id)
        sld_id_lst.insert(position, sld_id)

    def remove_slide(self, slide: Slide) -> None:
        sld_id_lst = self.prs.slides._sldIdLst
        sld_id = list(sld_id_lst)[self.slide_position(slide)]
        rid = sld_id.rId
        sld_id_lst.remove(sld_id)
        if rid in self.prs.part.rels:
            self.prs.part.drop_rel(rid)
