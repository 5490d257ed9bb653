from dataclasses import dataclass, fields


@dataclass
class ScannerFlags:
    """
    State of the scanner between bytes. The flags are orthogonal, several
    of them can be set at the same time (eg. in_tag and
    in_attribute_region).
    """

    in_tag: bool = False
    in_closing_tag: bool = False
    in_attribute_region: bool = False
    in_string: bool = False
    has_text: bool = False
    ignore_once: bool = False
    in_annotation: bool = False

    def reset(self):
        for flag in fields(self):
            setattr(self, flag.name, False)

    def leave_tag(self):
        self.in_tag = False
        self.in_closing_tag = False
        self.in_attribute_region = False
