"""File persistence through an image upload pipeline."""

from sidebyside.views import CodePanel, Heading, Page, Prose

UPLOAD = """\
<input
  type="file"
  accept="image/png, image/jpeg"
  onChange={(e) => setFile(e.target.files[0])}
/>"""

WRITE = """\
public function store(Request $request)
{
    $file = $request->file('file');
    $original = file_get_contents($file);

    // Keep the original upload
    $file->move($destinationPath, $graphicFileNameOriginal);

    $im = new \\Imagick();
    $im->readImageBlob($original);

    // Write the processed image, then push it to cloud storage
    $im->writeImage("$destinationPath/$graphicFileName");
    Storage::disk('do')->put($graphicFileName, $im->getImageBlob());
}"""

READ = """\
public function show(string $name)
{
    $path = public_path("graphics/$name");
    if (!file_exists($path)) {
        abort(404);
    }
    return response()->file($path);
}"""

FORMATS = """\
Schema::create('board_designs', function (Blueprint $table) {
    $table->uuid('uuid')->primary();
    $table->json('layers');   // serialized design state
    $table->timestamps();
});"""


def file_persistence() -> Page:
    return Page(
        title="File Persistence",
        layout="article",
        description="Reading, writing, and processing files with a real-world image pipeline.",
        body=(
            Heading("Getting a filename from the user"),
            CodePanel("JavaScript", UPLOAD, "components/uploader/uploader.jsx"),
            Heading("Opening and writing files"),
            Prose(
                "<p>An upload is written more than once: the original is kept "
                "for reprocessing, the processed image is written locally and a "
                "copy goes to S3-compatible storage.</p>"
            ),
            CodePanel("PHP", WRITE, "app/Http/Controllers/GraphicController.php"),
            Heading("Opening and reading files"),
            CodePanel("PHP", READ, "app/Http/Controllers/GraphicController.php"),
            Heading("Data formats"),
            Prose(
                "<p>Structured design state is stored as JSON, which every language "
                "on this site can read and write.</p>"
            ),
            CodePanel("PHP", FORMATS, "database/migrations/create_board_designs_table.php"),
            Heading("Wrapping up"),
            Prose(
                "<p>Files outlive the process that wrote them. Keep originals, "
                "write derived files separately, and pick formats other programs "
                "can read.</p>"
            ),
        ),
    )
