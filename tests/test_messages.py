"""
Tests for the thread-safe message holder.
"""

import threading

from xlmatch.messages import MessageBox


class TestMessageBox:
    def test_get_set(self):
        box = MessageBox()
        assert box.get() == ""
        box.set("done")
        assert box.get() == "done"

    def test_concurrent_writers(self):
        box = MessageBox("start")
        texts = [f"status {i}" for i in range(20)]
        threads = [threading.Thread(target=box.set, args=(t,)) for t in texts]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert box.get() in texts
