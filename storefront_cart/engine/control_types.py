"""
Control type handlers

One handler per attribute control type. A handler knows how to turn raw
submitted values into selection entries and how to reflect an existing
selection back onto the attribute's view model, so both call sites share
the same per-type logic.
"""

import logging
import uuid
from datetime import date
from typing import Optional, Sequence

from ..models.attributes import ControlType, RawAttributeValue
from ..models.presentation import CheckoutAttributeModel
from .selection import INTEGER_TOKEN, AttributeSelection

logger = logging.getLogger(__name__)


def parse_value_id(raw: Optional[str]) -> Optional[int]:
    """First comma separated token of a raw value as an int, None if unparsable"""
    if not raw:
        return None
    token = raw.split(",")[0].strip()
    if not INTEGER_TOKEN.match(token):
        logger.debug(f"Skipping non-numeric attribute value token: {token!r}")
        return None
    return int(token)


class ControlTypeHandler:
    """Base handler, subclasses implement one control type family"""

    def resolve(
        self,
        attribute_id: int,
        raw_values: Sequence[RawAttributeValue],
        selection: AttributeSelection,
    ) -> None:
        raise NotImplementedError

    def apply_selection(
        self,
        model: CheckoutAttributeModel,
        selection: AttributeSelection,
    ) -> None:
        raise NotImplementedError


class SingleSelectHandler(ControlTypeHandler):
    """Dropdown list, radio list and boxes: one value id"""

    def resolve(self, attribute_id, raw_values, selection):
        if not raw_values:
            return
        value_id = parse_value_id(raw_values[0].value)
        if value_id is not None and value_id > 0:
            selection.add_value(attribute_id, value_id)

    def apply_selection(self, model, selection):
        if not selection:
            return

        # Clear default selection, then mark what the customer picked
        selected_ids = set(selection.value_ids(model.id))
        for value in model.values:
            value.is_pre_selected = value.id in selected_ids


class MultiSelectHandler(SingleSelectHandler):
    """Checkboxes: every submitted value id"""

    def resolve(self, attribute_id, raw_values, selection):
        for raw in raw_values:
            value_id = parse_value_id(raw.value)
            if value_id is not None and value_id > 0:
                selection.add_value(attribute_id, value_id)


class TextHandler(ControlTypeHandler):
    """Text box and multi-line text box"""

    def resolve(self, attribute_id, raw_values, selection):
        text = ",".join(raw.value or "" for raw in raw_values)
        if text.strip():
            selection.add_value(attribute_id, text)

    def apply_selection(self, model, selection):
        entered_text = selection.first_value(model.id)
        if entered_text:
            model.text_value = entered_text


class DateHandler(ControlTypeHandler):
    """Date picker: the date component of the first raw value"""

    def resolve(self, attribute_id, raw_values, selection):
        if raw_values and raw_values[0].date is not None:
            selection.add_value(attribute_id, raw_values[0].date)

    def apply_selection(self, model, selection):
        entered_date = selection.first_value(model.id)
        if not entered_date:
            return
        try:
            selected = date.fromisoformat(entered_date)
        except ValueError:
            logger.debug(f"Stored date for attribute {model.id} is not ISO formatted: {entered_date!r}")
            return
        model.selected_day = selected.day
        model.selected_month = selected.month
        model.selected_year = selected.year


class FileUploadHandler(TextHandler):
    """File upload: the raw values reference an uploaded download"""

    def apply_selection(self, model, selection):
        file_value = selection.first_value(model.id)
        if not file_value:
            return
        try:
            model.uploaded_file_guid = str(uuid.UUID(file_value))
        except ValueError:
            logger.debug(f"Stored file reference for attribute {model.id} is not a guid")


HANDLERS: dict[ControlType, ControlTypeHandler] = {
    ControlType.DROPDOWN_LIST: SingleSelectHandler(),
    ControlType.RADIO_LIST: SingleSelectHandler(),
    ControlType.BOXES: SingleSelectHandler(),
    ControlType.CHECKBOXES: MultiSelectHandler(),
    ControlType.TEXT_BOX: TextHandler(),
    ControlType.MULTILINE_TEXTBOX: TextHandler(),
    ControlType.DATEPICKER: DateHandler(),
    ControlType.FILE_UPLOAD: FileUploadHandler(),
}


def get_handler(control_type) -> Optional[ControlTypeHandler]:
    """Handler for a control type, None for control types without one"""
    return HANDLERS.get(control_type)
