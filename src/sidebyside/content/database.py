"""Database persistence: connections, migrations, CRUD and SQL injection."""

from sidebyside.views import CodePanel, Heading, Page, Prose

ENV = """\
DB_CONNECTION=mysql
DB_HOST=127.0.0.1
DB_PORT=3306
DB_DATABASE=customcult
DB_USERNAME=customcult"""

CONNECTION = """\
import { drizzle } from 'drizzle-orm/postgres-js'
import postgres from 'postgres'

const client = postgres(process.env.DATABASE_URL!)
export const db = drizzle(client)"""

SCHEMA = """\
export const tweets = pgTable('tweets', {
  id: uuid('id').primaryKey().defaultRandom(),
  content: text('content').notNull(),
  profileId: uuid('profile_id').notNull().references(() => profiles.id),
  createdAt: timestamp('created_at').defaultNow().notNull(),
})"""

CRUD = """\
export async function createTweet(userId: string, input: TweetInput) {
  const validated = tweetSchema.parse(input)
  return db.insert(tweets)
    .values({ content: validated.content, profileId: userId })
    .returning()
}"""

VULNERABLE = """\
// DANGEROUS: SQL injection vulnerable
const result = await db.execute(
    `SELECT * FROM users WHERE id = '${userId}'`
);
// If userId = "'; DROP TABLE users; --" ... goodbye data"""

PARAMETERIZED = """\
// eq() creates a parameterized comparison; the value is sent separately from the SQL
const results = await db.select().from(tweets).where(eq(tweets.id, tweetId));"""


def database() -> Page:
    return Page(
        title="Database Persistence",
        layout="article",
        description="Connections, CRUD, migrations, and SQL injection prevention.",
        body=(
            Heading("Database Connection"),
            CodePanel("Bash", ENV, ".env"),
            CodePanel("TypeScript", CONNECTION, "app/lib/db/connection.ts"),
            Heading("Database Initialization (Migrations)"),
            CodePanel("TypeScript", SCHEMA, "app/lib/db/schema.ts"),
            Heading("CRUD Operations"),
            CodePanel("TypeScript", CRUD, "app/models/tweet/tweet.model.ts"),
            Heading("Repository Pattern"),
            Prose(
                "<p>Routes call functions like <code>createTweet</code>, never the "
                "ORM directly. Swapping the storage layer touches one module.</p>"
            ),
            Heading("SQL Injection"),
            Heading("Vulnerable (do not do this)", level=3),
            CodePanel("JavaScript", VULNERABLE),
            Heading("Protected", level=3),
            CodePanel("TypeScript", PARAMETERIZED),
            Prose(
                "<p>ORMs send the query and the values to the database separately, "
                "so user input is treated as data, never as SQL.</p>"
            ),
        ),
    )
