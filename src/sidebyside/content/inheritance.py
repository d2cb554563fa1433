"""Inheritance and polymorphism, shown on a TypeScript board hierarchy."""

from sidebyside.views import CodePanel, Heading, Page, Prose

BASE_CLASS = """\
class Snowboard {
  length: number
  width: number
  sidecut: number
  flex: number

  constructor(length: number, width: number, sidecut: number, flex: number) {
    this.length = length
    this.width = width
    this.sidecut = sidecut
    this.flex = flex
  }

  calculateEffectiveEdge(): number {
    return this.length - 2 * this.sidecut
  }
}

class AllMountainBoard extends Snowboard {
  // Inherits everything from Snowboard.
}

const myBoard = new AllMountainBoard(158, 25.5, 8, 6)
console.log(myBoard.calculateEffectiveEdge()) // 142"""

SUPER_CALL = """\
class HalfpipeBoard extends Snowboard {
  wallHeight: number

  constructor(
    length: number,
    width: number,
    sidecut: number,
    flex: number,
    wallHeight: number
  ) {
    // Initialize the parent class properties first
    super(length, width, sidecut, flex)
    this.wallHeight = wallHeight
  }

  calculateEffectiveEdge(): number {
    // Shorter edge for quick transitions between walls
    return this.length - 2 * this.sidecut - 2
  }
}"""

OVERRIDING = """\
class BoardercrossBoard extends Snowboard {
  calculateEffectiveEdge(): number {
    // Longer edge for stability at speed
    return this.length - 2 * this.sidecut + 3
  }
}

class PowderBoard extends Snowboard {
  calculateEffectiveEdge(): number {
    // Tapered nose: less edge in contact
    return (this.length - 2 * this.sidecut) * 0.9
  }
}"""

POLYMORPHISM = """\
const quiver: Snowboard[] = [
  new AllMountainBoard(158, 25.5, 8, 6),
  new HalfpipeBoard(152, 24.8, 7.5, 4, 22),
  new BoardercrossBoard(163, 25.8, 9, 8),
  new PowderBoard(165, 26.5, 9.5, 5),
]

for (const board of quiver) {
  // The right override runs for each board type
  console.log(board.constructor.name, board.calculateEffectiveEdge())
}"""

INSTANCEOF = """\
function describe(board: Snowboard): string {
  if (board instanceof HalfpipeBoard) {
    // Narrowed: wallHeight is available here
    return `Halfpipe board for ${board.wallHeight}ft walls`
  }
  return `Board with ${board.calculateEffectiveEdge()}cm of edge`
}"""


def inheritance() -> Page:
    return Page(
        title="Inheritance & Polymorphism",
        layout="article",
        description=(
            "Inheritance, method overriding, polymorphism, and SOLID principles "
            "demonstrated with a TypeScript snowboard type hierarchy."
        ),
        body=(
            Heading("What is Inheritance?"),
            Prose(
                "<p>A class can <strong>extend</strong> another, inheriting its "
                "properties and methods. The child <em>is-a</em> parent but can "
                "specialize behavior. Every snowboard has a length, width, sidecut "
                "and flex; an all-mountain, halfpipe, boardercross and powder board "
                "each compute their effective edge differently.</p>"
            ),
            Heading("Extending a Base Class"),
            CodePanel("TypeScript", BASE_CLASS, "Snowboard.ts"),
            Heading("Calling the Base Constructor"),
            Prose(
                "<p>A child with its own constructor must call <code>super()</code> "
                "before touching <code>this</code>. TypeScript enforces it at "
                "compile time.</p>"
            ),
            CodePanel("TypeScript", SUPER_CALL, "HalfpipeBoard.ts"),
            Heading("Method Overriding"),
            CodePanel("TypeScript", OVERRIDING, "BoardTypes.ts"),
            Heading("Polymorphism"),
            Prose(
                "<p>Code written against <code>Snowboard</code> works with every "
                "subclass. The call site stays the same while the behavior follows "
                "the runtime type.</p>"
            ),
            CodePanel("TypeScript", POLYMORPHISM, "polymorphism.ts"),
            Heading("Type Checking with instanceof"),
            CodePanel("TypeScript", INSTANCEOF, "instanceof.ts"),
            Heading("SOLID Principles"),
            Prose(
                "<p>Liskov substitution is the rule that keeps this hierarchy "
                "honest: any board must be usable wherever a <code>Snowboard</code> "
                "is expected, without the caller checking its type first.</p>"
            ),
        ),
    )
