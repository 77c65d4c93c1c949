from dataclasses import dataclass, field
from historystack import SaveStack, TimelineStack


@dataclass
class Document:

    lines: list = field(default_factory=list)
    caret: int = 0

    def typeLine(self, text):
        self.lines.insert(self.caret, text)
        self.caret += 1

    def deleteLine(self):
        if self.caret:
            self.caret -= 1
            del self.lines[self.caret]


if __name__ == "__main__":
    doc = TimelineStack(Document())

    # every edit starts from a copy of the previous state
    doc.save().typeLine("Dear Sir,")
    doc.save().typeLine("")
    doc.save().typeLine("I write to complain.")
    assert doc.lines == ["Dear Sir,", "", "I write to complain."]
    assert doc.undoCount() == 3

    doc.undo()
    doc.undo()
    assert doc.lines == ["Dear Sir,"]
    doc.redo()
    assert doc.lines == ["Dear Sir,", ""]

    # a fresh edit abandons "I write to complain."
    doc.save().typeLine("Thank you for your letter.")
    assert doc.lines == ["Dear Sir,", "", "Thank you for your letter."]
    assert not doc.redo()

    doc.save().deleteLine()
    assert doc.caret == 2
    assert doc.undo().value.caret == 3

    # a SaveStack is handy for temporary, nested changes
    settings = SaveStack({"wrap": True, "tabSize": 4})
    settings.push()
    settings["tabSize"] = 8
    settings.pushValue({"wrap": False, "tabSize": 2})
    assert settings["tabSize"] == 2
    settings.pop()
    assert settings["tabSize"] == 8
    settings.pop()
    assert settings == {"wrap": True, "tabSize": 4}
    assert settings.pop() is None
