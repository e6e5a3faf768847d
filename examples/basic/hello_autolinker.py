"""Link a sentence in one call — zero config, zero deps."""

from autolinker import link

html = link("Go to google.com or mail me at asdf@asdf.com", new_window=False)
print(html)
