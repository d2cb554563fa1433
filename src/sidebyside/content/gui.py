"""GUI programming with React components."""

from sidebyside.views import CodePanel, Heading, Page, Prose

COMPONENT = """\
export default function Landing() {
  const [activeTab, setActiveTab] = useState("design")

  return (
    <StyledLanding>
      <LandingTabs active={activeTab} onChange={setActiveTab} />
      {activeTab === "design" ? <BoardDesigner /> : <SavedBoards />}
    </StyledLanding>
  )
}"""

SCHEMA = """\
export const tweetSchema = z.object({
  content: z.string().min(1).max(280),
})

export type TweetInput = z.infer<typeof tweetSchema>"""

CONTROLS = """\
<form onSubmit={handleSubmit}>
  <label htmlFor="email">Email</label>
  <input id="email" type="email" value={email}
         onChange={(e) => setEmail(e.target.value)} />
  <button type="submit" disabled={!email}>Sign up</button>
</form>"""

EVENTS = """\
function StanceAngleInput({ value, onChange }) {
  const handleChange = (event) => {
    const angle = Number(event.target.value)
    if (angle >= -30 && angle <= 30) {
      onChange(angle)
    }
  }
  return <input type="range" min={-30} max={30} value={value} onChange={handleChange} />
}"""

MODAL = """\
function Modal({ open, onClose, children }) {
  if (!open) return null
  return (
    <div className="modal-backdrop" onClick={onClose}>
      <div className="modal" onClick={(e) => e.stopPropagation()}>
        {children}
      </div>
    </div>
  )
}"""


def gui() -> Page:
    return Page(
        title="GUI Programming",
        layout="article",
        description="Building interfaces with React: components, state, events, and modals.",
        body=(
            Prose(
                "<p>A graphical interface is a tree of objects that own state and "
                "react to events. In React every piece of the tree is a "
                "component.</p>"
            ),
            Heading("Creating a GUI: Component Architecture"),
            CodePanel("JavaScript", COMPONENT, "pages/landing/landing.jsx"),
            Heading("Model Classes for Form Data"),
            CodePanel("TypeScript", SCHEMA, "models/tweet/tweet.schema.ts"),
            Heading("Adding Controls to Forms"),
            CodePanel("JavaScript", CONTROLS, "pages/modal-views/signup.jsx"),
            Heading("Event Handling"),
            Prose(
                "<p>Handlers receive the event, validate what came in, and hand the "
                "result up through a callback prop.</p>"
            ),
            CodePanel(
                "JavaScript", EVENTS, "components/board-sliders/stance-angle-input.jsx"
            ),
            Heading("Custom Dialog: The Modal Pattern"),
            CodePanel("JavaScript", MODAL, "components/uploader/uploader.jsx"),
        ),
    )
