"""Customise each link with a replacement hook."""

from autolinker import Autolinker, MatchKind


def nofollow_urls(match):
    if match.kind is MatchKind.EMAIL:
        return False  # leave emails as plain text
    if match.kind is MatchKind.URL:
        tag = linker.tag_builder.build(match)
        return tag.set_attr("rel", "nofollow")
    return True  # default anchor


linker = Autolinker(new_window=False, replace_fn=nofollow_urls)
print(linker.link("Docs at python.org, questions to help@python.org, call (123) 456-7890"))
