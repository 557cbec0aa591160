"""Reserved-word index on search trees and hash tables."""