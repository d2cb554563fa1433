"""Three problems that needed research before they could be solved."""

from sidebyside.views import CodePanel, Heading, Page, Prose

UV_MAPPING = """\
const texture = new THREE.TextureLoader().load(graphicUrl)
texture.wrapS = THREE.ClampToEdgeWrapping
texture.flipY = false

board.traverse((child) => {
  if (child.isMesh && child.name === 'topsheet') {
    child.material.map = texture
    child.material.needsUpdate = true
  }
})"""

IMAGICK = """\
$im->resizeImage($width, $height, \\Imagick::FILTER_LANCZOS, 1);
$im->cropImage($boardWidth, $boardHeight, $offsetX, $offsetY);
$im->compositeImage($overlay, \\Imagick::COMPOSITE_OVER, 0, 0);"""

API_ROUTES = """\
export const apiRoutes: ApiRoute[] = [
    { method: 'POST',   path: '/api/tweets',          handler: handleCreateTweet },
    { method: 'GET',    path: '/api/tweets',          handler: handleGetFeed },
    { method: 'DELETE', path: '/api/tweets/:tweetId', handler: handleDeleteTweet },
];"""


def web_research() -> Page:
    return Page(
        title="Web Research",
        layout="article",
        description="Three real problems that required deep research to solve.",
        body=(
            Heading("Three.js UV Texture Mapping on Snowboard Mesh"),
            Prose(
                "<p>A user's graphic had to wrap the topsheet of a 3D board model "
                "without stretching. The answer was in the mesh's UV layout, not "
                "the texture.</p>"
            ),
            CodePanel("JavaScript", UV_MAPPING, "pages/landing/threecode.js"),
            Heading("Image Processing Pipeline with Imagick"),
            CodePanel("PHP", IMAGICK, "app/Http/Controllers/GraphicController.php"),
            Heading("Building a Framework-Agnostic API Router"),
            Prose(
                "<p>A central table of method, path and handler, matched in order, "
                "with path parameters extracted by splitting on <code>/</code>.</p>"
            ),
            CodePanel("TypeScript", API_ROUTES, "app/api/router.ts"),
        ),
    )
