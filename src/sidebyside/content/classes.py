"""Classes in five languages, built around a ``Snowboard`` class.

Every section pairs prose with its own selector, so a reader can keep
C# open on one example and Python on the next.
"""

from sidebyside.views import (
    LANGUAGES,
    CodePanel,
    Heading,
    Page,
    Prose,
    VariantContent,
    VariantSelector,
)

FILENAMES = {
    "C++": "Snowboard.h",
    "C#": "Snowboard.cs",
    "Python": "snowboard.py",
    "TypeScript": "Snowboard.ts",
    "PHP": "Snowboard.php",
}

NOT_TRANSLATED = (Prose("<p>This example has not been written for this language yet.</p>"),)


def snowboard_selector(key: str, sources: dict[str, str], filenames=None) -> VariantSelector:
    """One selector over LANGUAGES with a code panel per language."""
    filenames = filenames or FILENAMES
    cases = {
        language: (CodePanel(language, code, filenames.get(language)),)
        for language, code in sources.items()
    }
    return VariantSelector(LANGUAGES, VariantContent(cases, NOT_TRANSLATED), key=key)


# -- What is a class? --------------------------------------------------------

WHAT = {
    "C++": """\
class Snowboard {
    // A class groups related data and behavior
    // Properties = data, Methods = behavior
private:
    float length;
    float width;
    float sidecut;
    int flex;
};""",
    "C#": """\
public class Snowboard
{
    // A class groups related data and behavior
    // Properties = data, Methods = behavior
    private float length;
    private float width;
    private float sidecut;
    private int flex;
}""",
    "Python": '''\
class Snowboard:
    """A class groups related data and behavior.
    Properties = data, Methods = behavior."""

    # Python classes define their data in __init__
    # We'll see that in the next section
    pass''',
    "TypeScript": """\
class Snowboard {
  // A class groups related data and behavior
  // Properties = data, Methods = behavior
  private length: number
  private width: number
  private sidecut: number
  private flex: number
}""",
    "PHP": """\
<?php

class Snowboard
{
    // A class groups related data and behavior
    // Properties = data, Methods = behavior
    private float $length;
    private float $width;
    private float $sidecut;
    private int $flex;
}""",
}

# -- How is a class defined? -------------------------------------------------

DEFINE = {
    "C++": """\
class Snowboard {
private:
    float length;
    float width;
    float sidecut;
    int flex;

public:
    Snowboard(float length, float width, float sidecut, int flex)
        : length(length), width(width), sidecut(sidecut), flex(flex)
    {
    }
};""",
    "C#": """\
public class Snowboard
{
    public float Length { get; private set; }
    public float Width { get; private set; }
    public float Sidecut { get; private set; }
    public int Flex { get; private set; }

    public Snowboard(float length, float width, float sidecut, int flex)
    {
        Length = length;
        Width = width;
        Sidecut = sidecut;
        Flex = flex;
    }
}""",
    "Python": '''\
class Snowboard:
    """Blueprint for a snowboard with core geometry properties."""

    def __init__(self, length: float, width: float, sidecut: float, flex: int):
        self._length = length
        self._width = width
        self._sidecut = sidecut
        self._flex = flex''',
    "TypeScript": """\
class Snowboard {
  private length: number
  private width: number
  private sidecut: number
  private flex: number

  constructor(length: number, width: number, sidecut: number, flex: number) {
    this.length = length
    this.width = width
    this.sidecut = sidecut
    this.flex = flex
  }
}""",
    "PHP": """\
<?php

class Snowboard
{
    private float $length;
    private float $width;
    private float $sidecut;
    private int $flex;

    public function __construct(
        float $length,
        float $width,
        float $sidecut,
        int $flex
    ) {
        $this->length = $length;
        $this->width = $width;
        $this->sidecut = $sidecut;
        $this->flex = $flex;
    }
}""",
}

# -- How do you instantiate an object? ----------------------------------------

INSTANTIATE_FILENAMES = {
    "C++": "main.cpp",
    "C#": "Program.cs",
    "Python": "main.py",
    "TypeScript": "main.ts",
    "PHP": "main.php",
}

INSTANTIATE = {
    "C++": """\
#include "Snowboard.h"
#include <iostream>

int main() {
    // Stack allocation
    Snowboard board(158.0f, 25.5f, 7.8f, 6);

    // Or heap allocation with a pointer
    Snowboard* boardPtr = new Snowboard(158.0f, 25.5f, 7.8f, 6);

    // Don't forget to clean up heap-allocated objects
    delete boardPtr;

    return 0;
}""",
    "C#": """\
// Create a new Snowboard instance
var board = new Snowboard(158.0f, 25.5f, 7.8f, 6);

// C# objects are always on the managed heap
// The garbage collector handles cleanup
Console.WriteLine($"Board length: {board.Length}cm");""",
    "Python": """\
# Create a new Snowboard instance
# Python doesn't use "new", just call the class like a function
board = Snowboard(158.0, 25.5, 7.8, 6)

# Python manages memory automatically with reference counting
print(f"Board length: {board.length}cm")""",
    "TypeScript": """\
// Create a new Snowboard instance
const board = new Snowboard(158, 25.5, 7.8, 6)

// TypeScript compiles to JavaScript, which uses
// garbage collection for memory management
console.log("Board created:", board)""",
    "PHP": """\
<?php

require_once 'Snowboard.php';

// Create a new Snowboard instance
$board = new Snowboard(158.0, 25.5, 7.8, 6);

// PHP uses reference counting and a cycle collector
echo "Board created successfully\\n";""",
}

# -- Overloaded constructors --------------------------------------------------

OVERLOAD = {
    "C++": """\
class Snowboard {
private:
    float length;
    float width;
    float sidecut;
    int flex;

public:
    // Default constructor: a preset all-mountain board
    Snowboard()
        : length(155.0f), width(25.0f), sidecut(8.0f), flex(5)
    {
    }

    // Parameterized constructor: caller specifies everything
    Snowboard(float length, float width, float sidecut, int flex)
        : length(length), width(width), sidecut(sidecut), flex(flex)
    {
    }
};

// Usage:
// Snowboard defaultBoard;                         // uses default
// Snowboard customBoard(158.0f, 25.5f, 7.8f, 6); // uses parameterized""",
    "C#": """\
public class Snowboard
{
    public float Length { get; private set; }
    public float Width { get; private set; }
    public float Sidecut { get; private set; }
    public int Flex { get; private set; }

    // Default constructor: a preset all-mountain board
    public Snowboard()
    {
        Length = 155.0f;
        Width = 25.0f;
        Sidecut = 8.0f;
        Flex = 5;
    }

    // Parameterized constructor: caller specifies everything
    public Snowboard(float length, float width, float sidecut, int flex)
    {
        Length = length;
        Width = width;
        Sidecut = sidecut;
        Flex = flex;
    }
}""",
    "Python": '''\
class Snowboard:
    """Python doesn't support true overloading.
    Instead, use default parameter values."""

    def __init__(
        self,
        length: float = 155.0,
        width: float = 25.0,
        sidecut: float = 8.0,
        flex: int = 5,
    ):
        self._length = length
        self._width = width
        self._sidecut = sidecut
        self._flex = flex

# Usage:
# default_board = Snowboard()                     # uses defaults
# custom_board = Snowboard(158.0, 25.5, 7.8, 6)  # overrides all
# partial_board = Snowboard(length=162.0, flex=8) # mix and match''',
    "TypeScript": """\
class Snowboard {
  private length: number
  private width: number
  private sidecut: number
  private flex: number

  // TypeScript uses optional params with defaults
  // instead of true overloading
  constructor(
    length: number = 155,
    width: number = 25.0,
    sidecut: number = 8.0,
    flex: number = 5
  ) {
    this.length = length
    this.width = width
    this.sidecut = sidecut
    this.flex = flex
  }
}""",
    "PHP": """\
<?php

class Snowboard
{
    private float $length;
    private float $width;
    private float $sidecut;
    private int $flex;

    // PHP uses default parameter values
    // instead of true overloading
    public function __construct(
        float $length = 155.0,
        float $width = 25.0,
        float $sidecut = 8.0,
        int $flex = 5
    ) {
        $this->length = $length;
        $this->width = $width;
        $this->sidecut = $sidecut;
        $this->flex = $flex;
    }
}

// $partialBoard = new Snowboard(length: 162.0, flex: 8); // named args (PHP 8+)""",
}

# -- Getters and setters ------------------------------------------------------

ACCESSORS = {
    "C++": """\
class Snowboard {
private:
    float length;
    int flex;

public:
    // Getters are const because they don't modify the object
    float getLength() const { return length; }
    int getFlex() const { return flex; }

    // Setters validate before assigning
    void setFlex(int newFlex) {
        if (newFlex >= 1 && newFlex <= 10) {
            flex = newFlex;
        }
    }

    void setLength(float newLength) {
        if (newLength > 0) {
            length = newLength;
        }
    }
};""",
    "C#": """\
public class Snowboard
{
    // C# properties with get/set accessors
    public float Length { get; private set; }

    // Property with validation in the setter
    private int _flex;
    public int Flex
    {
        get => _flex;
        set
        {
            if (value >= 1 && value <= 10)
                _flex = value;
        }
    }
}""",
    "Python": """\
class Snowboard:
    def __init__(self, length: float, width: float, sidecut: float, flex: int):
        self._length = length
        self._width = width
        self._sidecut = sidecut
        self._flex = flex

    # @property makes a method act like an attribute
    @property
    def length(self) -> float:
        return self._length

    @length.setter
    def length(self, value: float) -> None:
        if value > 0:
            self._length = value

    @property
    def flex(self) -> int:
        return self._flex

    @flex.setter
    def flex(self, value: int) -> None:
        if 1 <= value <= 10:
            self._flex = value

# board.flex = 8  # calls the setter with validation""",
    "TypeScript": """\
class Snowboard {
  private _length: number
  private _flex: number

  constructor(length: number, flex: number) {
    this._length = length
    this._flex = flex
  }

  get length(): number {
    return this._length
  }

  set length(value: number) {
    if (value > 0) {
      this._length = value
    }
  }

  get flex(): number {
    return this._flex
  }

  set flex(value: number) {
    if (value >= 1 && value <= 10) {
      this._flex = value
    }
  }
}""",
    "PHP": """\
<?php

class Snowboard
{
    private float $length;
    private int $flex;

    // PHP uses explicit getter/setter methods
    public function getLength(): float
    {
        return $this->length;
    }

    public function getFlex(): int
    {
        return $this->flex;
    }

    public function setFlex(int $value): void
    {
        if ($value >= 1 && $value <= 10) {
            $this->flex = $value;
        }
    }
}""",
}

# -- A calculate method -------------------------------------------------------

CALCULATE = {
    "C++": """\
// Calculate the contact edge between the bindings
float Snowboard::calculateEffectiveEdge() const {
    return length - (2.0f * sidecut);
}

// Snowboard board(158.0f, 25.5f, 7.8f, 6);
// float edge = board.calculateEffectiveEdge(); // 142.4""",
    "C#": """\
// Calculate the contact edge between the bindings
public float CalculateEffectiveEdge()
{
    return Length - (2.0f * Sidecut);
}

// var board = new Snowboard(158.0f, 25.5f, 7.8f, 6);
// float edge = board.CalculateEffectiveEdge(); // 142.4""",
    "Python": '''\
class Snowboard:
    ...

    def calculate_effective_edge(self) -> float:
        """Calculate the contact edge between the bindings.

        Returns the length of edge that touches the snow during a carve.
        """
        return self._length - (2 * self._sidecut)

# board = Snowboard(158.0, 25.5, 7.8, 6)
# edge = board.calculate_effective_edge()  # 142.4''',
    "TypeScript": """\
/** Calculate the contact edge between the bindings */
calculateEffectiveEdge(): number {
  return this.length - (2 * this.sidecut)
}

// const board = new Snowboard(158, 25.5, 7.8, 6)
// const edge = board.calculateEffectiveEdge() // 142.4""",
    "PHP": """\
/** Calculate the contact edge between the bindings */
public function calculateEffectiveEdge(): float
{
    return $this->length - (2 * $this->sidecut);
}

// $board = new Snowboard(158.0, 25.5, 7.8, 6);
// $edge = $board->calculateEffectiveEdge(); // 142.4""",
}


def classes() -> Page:
    return Page(
        title="Classes in Five Languages",
        layout="article",
        description=(
            "Understanding classes across C++, C#, Python, TypeScript, and PHP "
            "using a Snowboard class example."
        ),
        body=(
            Prose(
                "<p>Classes click once you see them across a few languages. The "
                "syntax changes, but the concept stays the same: a blueprint that "
                "bundles data and behavior together. We will build a "
                "<code>Snowboard</code> class step by step in C++, C#, Python, "
                "TypeScript, and PHP.</p>"
            ),
            Heading("What is a class?"),
            Prose(
                "<p>A class is a blueprint for creating objects. It defines which "
                "properties every board has (length, width, sidecut radius, flex "
                "rating) and what it can do. The class itself is not a snowboard. "
                "When you instantiate it, <em>then</em> you get a snowboard object "
                "with real values.</p>"
            ),
            snowboard_selector("what", WHAT),
            Heading("How is a class defined?"),
            Prose(
                "<p>A constructor runs when a new object is created and sets the "
                "initial values of its properties. C++ uses an initializer list, C# "
                "property syntax, Python <code>self</code> and "
                "<code>__init__</code>, TypeScript a <code>constructor</code>, and "
                "PHP typed properties with <code>__construct</code>.</p>"
            ),
            snowboard_selector("define", DEFINE),
            Heading("How do you instantiate an object?"),
            Prose(
                "<p>Here we create a 158cm board with a 25.5cm waist, a 7.8m "
                "sidecut radius and a flex rating of 6: realistic specs for an "
                "all-mountain board. In every language you call the class with "
                "arguments and keep the result.</p>"
            ),
            snowboard_selector("instantiate", INSTANTIATE, INSTANTIATE_FILENAMES),
            Heading("Overloaded constructors"),
            Prose(
                "<p>C++ and C# support true overloading: several constructors with "
                "different parameter lists. Python, TypeScript and PHP reach the "
                "same goal with default parameter values.</p>"
            ),
            snowboard_selector("overload", OVERLOAD),
            Heading("Getters and setters"),
            Prose(
                "<p>Private properties need controlled access from outside the "
                "class. Getters and setters provide it, and a setter is the natural "
                "place for validation.</p>"
            ),
            snowboard_selector("accessors", ACCESSORS),
            Heading("A calculate method"),
            Prose(
                "<p>A class also holds behavior that operates on its data. The "
                "effective edge is the part of the edge touching the snow in a "
                "carve: <code>length - (2 * sidecut)</code>.</p>"
            ),
            snowboard_selector("calculate", CALCULATE),
            Heading("Wrapping up"),
            Prose(
                "<p>Curly braces or colons, <code>this</code>, <code>self</code> or "
                "<code>$this</code>: the syntax changes, the concepts do not. Once "
                "the pattern is familiar, picking up a new language's class syntax "
                "takes minutes.</p>"
            ),
        ),
    )
