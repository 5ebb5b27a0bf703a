"""Blog — a small portico site.

Demonstrates convention routing, the ``show`` catch-all for slugs,
template globals seeded from the environment, and the 404 page.

    /                      -> Homepages.index()
    /blog                  -> Blog.index()
    /blog/view/2           -> Blog.view("2")
    /blog/hello-world      -> Blog.show("hello-world")
    /show/blog/hello-world -> same, through the legacy alias
    /about/team            -> About.team()

Run with any ASGI server, e.g.:
    uvicorn app:app
"""

from dataclasses import dataclass
from pathlib import Path

from portico import App, AppConfig, Controller, Response

VIEWS = Path(__file__).parent / "views"


@dataclass(frozen=True, slots=True)
class Post:
    id: str
    title: str


POSTS = {
    "hello-world": Post(id="1", title="Hello, World"),
    "second-post": Post(id="2", title="A Second Post"),
}

app = App(AppConfig.from_env(views_dir=VIEWS))


@app.template_filter()
def shout(value: str) -> str:
    return value.upper()


@app.controller()
class Homepages(Controller):
    def index(self):
        return self.render("home.html", posts=list(POSTS.values()))


@app.controller()
class Blog(Controller):
    def index(self):
        return self.render("blog/index.html", posts=list(POSTS.values()))

    def view(self, post_id):
        for slug, post in POSTS.items():
            if post.id == post_id:
                return self.show(slug)
        return self.renderer.not_found()

    def show(self, slug, *rest):
        post = POSTS.get(slug)
        if post is None:
            return self.renderer.not_found()
        return self.render("blog/post.html", post=post, slug=slug)


@app.controller()
class About(Controller):
    def index(self):
        return "About us"

    def team(self):
        return Response("The team").with_header("X-Section", "team")
