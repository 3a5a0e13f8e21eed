from linkedstructs.binary_search_tree import BinarySearchTree


def test_bst_insert():
    tree = BinarySearchTree([10, 5, 15, 3, 7, 12, 17])
    root = tree.root
    assert root.data == 10
    assert root.left.data == 5
    assert root.right.data == 15
    assert root.left.left.data == 3
    assert root.right.right.data == 17


def test_bst_insert_ignores_duplicates():
    tree = BinarySearchTree([10, 5, 10, 5, 15])
    assert list(tree.inorder()) == [5, 10, 15]


def test_bst_search():
    tree = BinarySearchTree([20, 10, 30])
    assert tree.search(10).data == 10
    assert tree.search(30).data == 30
    assert tree.search(25) is None
    assert 20 in tree
    assert 25 not in tree


def test_bst_find_min_max():
    tree = BinarySearchTree([20, 10, 5, 15, 30, 25, 40])
    assert tree.find_min().data == 5
    assert tree.find_max().data == 40


def test_find_min_max_on_empty_tree():
    tree = BinarySearchTree()
    assert tree.find_min() is None
    assert tree.find_max() is None


def test_bst_delete_leaf():
    tree = BinarySearchTree([8, 3, 10])
    tree.delete(10)
    assert tree.search(10) is None
    assert list(tree.inorder()) == [3, 8]


def test_bst_delete_one_child():
    tree = BinarySearchTree([8, 3, 1])
    tree.delete(3)
    assert tree.root.left.data == 1


def test_bst_delete_two_children():
    tree = BinarySearchTree([8, 3, 10, 9, 12])
    tree.delete(10)
    assert tree.root.right.data == 12
    assert 9 in tree
    assert 12 in tree
    assert 10 not in tree


def test_delete_root_and_missing_value():
    tree = BinarySearchTree([8])
    tree.delete(99)
    assert list(tree.inorder()) == [8]
    tree.delete(8)
    assert tree.root is None
    assert list(tree.inorder()) == []


def test_traversals():
    tree = BinarySearchTree([10, 5, 15, 3, 7, 12, 17])
    assert list(tree.inorder()) == [3, 5, 7, 10, 12, 15, 17]
    assert list(tree.preorder()) == [10, 5, 3, 7, 15, 12, 17]
    assert list(tree.postorder()) == [3, 7, 5, 12, 17, 15, 10]


def test_inorder_stays_sorted_after_many_deletions():
    values = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
    tree = BinarySearchTree(values)
    for value in (30, 70, 50):
        tree.delete(value)
    assert list(tree.inorder()) == [20, 35, 40, 45, 60, 65, 80]